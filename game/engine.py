# -*- coding: utf-8 -*-
"""
游戏引擎模块
负责开局、医生与疾病的行动结算、回合推进和胜负判定

引擎不直接读写控制台：所有可展示的信息都通过事件总线发布，
或保存在 history / current_case / 双方玩家状态中供展示层读取。
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from i18n import t as _t

from .card import Card, CardType, FormulaCard
from .card_data import CardRepository
from .config import GameConfig, get_config
from .enums import DiseaseType, DoctorAction, GameResult, GameState, PlayerRole, School
from .events import EventBus, EventType
from .exceptions import ConfigurationError, GameAlreadyStartedError, raise_if_game_not_started
from .medical_case import MedicalCase
from .player import Player
from .state_fsm import GameStateFSM
from .win_checker import GameOverInfo, WinConditionChecker

if TYPE_CHECKING:
    from ai.strategy import DoctorStrategy

logger = logging.getLogger(__name__)

ACUPOINT_MULTIPLIER = 2
WARM_DISEASE_ILLNESS_MULTIPLIER = 1.5
FORMULA_SIZE = 2
TEMP_FORMULA_NAME = "临时方剂"


def school_multiplier(school: School) -> int:
    """获取医生行动的流派加成倍率（针刺不受流派影响）"""
    return school.multiplier


@dataclass(slots=True)
class ActionRecord:
    """
    一次行动的结算记录

    Attributes:
        actor: 行动方
        kind: 行动类型（single_herb / formula / acupoint / symptom）
        cards: 本次消耗的手牌
        composed: 临时合成的组合牌（仅方剂）
        heal: 行动方的回复量（倍率计算后、封顶前）
        damage: 对对方造成的伤害（倍率计算后、保底前）
        skipped: 是否落空
        reason: 落空原因
    """
    actor: PlayerRole
    kind: str
    cards: List[Card] = field(default_factory=list)
    composed: Optional[Card] = None
    heal: int = 0
    damage: int = 0
    skipped: bool = False
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "actor": self.actor.value,
            "kind": self.kind,
            "cards": [c.name for c in self.cards],
            "composed": self.composed.name if self.composed else None,
            "heal": self.heal,
            "damage": self.damage,
            "skipped": self.skipped,
            "reason": self.reason,
        }


@dataclass(slots=True)
class TurnReport:
    """一次 play_turn() 的结算报告"""
    turn: int
    doctor_action: ActionRecord
    disease_action: Optional[ActionRecord]
    result: GameResult
    game_over: bool
    doctor_health: int
    disease_health: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "doctor_action": self.doctor_action.to_dict(),
            "disease_action": self.disease_action.to_dict() if self.disease_action else None,
            "result": self.result.value,
            "game_over": self.game_over,
            "doctor_health": self.doctor_health,
            "disease_health": self.disease_health,
        }


class GameEngine:
    """
    游戏引擎类

    引擎不创建也不销毁双方玩家，但在对局期间独占地修改它们。
    所有随机性都来自注入的 rng，给定种子即可完整复现一局。
    """

    def __init__(self, doctor: Player, disease: Player,
                 rng: Optional[random.Random] = None,
                 *,
                 config: Optional[GameConfig] = None,
                 repository: Optional[CardRepository] = None,
                 doctor_strategy: Optional['DoctorStrategy'] = None,
                 event_bus: Optional[EventBus] = None):
        """
        初始化游戏引擎

        Args:
            doctor: 医生一方
            disease: 疾病一方
            rng: 随机源（洗牌与行动选择），默认按配置中的种子创建
            config: 游戏配置，默认使用全局配置
            repository: 起始牌组数据仓库，默认读取 data/cards.json
            doctor_strategy: 医生行动策略，默认均匀随机
            event_bus: 事件总线
        """
        if doctor.role != PlayerRole.DOCTOR:
            raise ConfigurationError(f"{doctor.name} 不是医生", config_key="doctor")
        if disease.role != PlayerRole.DISEASE:
            raise ConfigurationError(f"{disease.name} 不是疾病", config_key="disease")

        self.doctor: Player = doctor
        self.disease: Player = disease
        self.config: GameConfig = config or get_config()
        self.rng: random.Random = rng if rng is not None else random.Random(self.config.seed)

        if doctor_strategy is None:
            from ai.strategy import RandomStrategy
            doctor_strategy = RandomStrategy(self.rng)
        self.doctor_strategy: 'DoctorStrategy' = doctor_strategy

        self.repository: Optional[CardRepository] = repository
        self.event_bus: EventBus = event_bus or EventBus()

        # 对局状态
        self.current_case: Optional[MedicalCase] = None
        self.turn: int = 1
        self.result: GameResult = GameResult.PENDING
        self.game_over_info: Optional[GameOverInfo] = None
        self.history: List[TurnReport] = []

        self._fsm = GameStateFSM()
        self.win_checker = WinConditionChecker(self, self.config.max_turns)

    # ==================== 状态查询 ====================

    @property
    def state(self) -> GameState:
        return self._fsm.current

    @property
    def game_over(self) -> bool:
        return self._fsm.is_finished

    def log_event(self, message: str, **extra_data) -> None:
        """记录游戏日志并通过事件总线发布"""
        logger.debug(message)
        self.event_bus.emit(EventType.LOG_MESSAGE, message=message, **extra_data)

    # ==================== 开局 ====================

    def start_game(self) -> None:
        """
        开始对局：装填并洗混双方牌组，各摸起始手牌，生成医案

        Raises:
            GameAlreadyStartedError: 对同一引擎重复开局
            DataLoadError: 起始数据无效，此时双方牌组与手牌保持不变
        """
        if self._fsm.is_started:
            raise GameAlreadyStartedError(current_state=self.state.value)

        if self.repository is None:
            self.repository = CardRepository()

        # 先生成全部起始数据，加载失败时双方状态不受影响
        doctor_deck = self.repository.create_doctor_deck()
        disease_deck = self.repository.create_disease_deck()
        case = self.repository.create_medical_case()

        self._initialize_decks(doctor_deck, disease_deck)

        hand_size = self.config.initial_hand_size
        self.doctor.draw_cards(hand_size)
        self.disease.draw_cards(hand_size)

        self.current_case = case
        self._fsm.transition(GameState.IN_PROGRESS)

        logger.info(
            "Game started | doctor=%s(%s) disease=%s(%s)",
            self.doctor.name, self.doctor.school.value,
            self.disease.name, self.disease.school.value,
        )
        self.event_bus.emit(
            EventType.GAME_START,
            doctor=self.doctor, disease=self.disease, case=self.current_case,
        )
        self.log_event(_t("log.game_start"))
        self.log_event(_t("log.player_intro", role=self.doctor.role.chinese_name,
                          name=self.doctor.name, school=self.doctor.school.chinese_name))
        self.log_event(_t("log.player_intro", role=self.disease.role.chinese_name,
                          name=self.disease.name, school=self.disease.school.chinese_name))

    def _initialize_decks(self, doctor_deck: List[Card], disease_deck: List[Card]) -> None:
        """装填起始牌组并分别独立洗牌"""
        self.doctor.deck.extend(doctor_deck)
        self.disease.deck.extend(disease_deck)
        self.rng.shuffle(self.doctor.deck)
        self.rng.shuffle(self.disease.deck)

    # ==================== 回合流程 ====================

    def play_turn(self) -> Optional[TurnReport]:
        """
        推进一个回合

        顺序：医生行动 → 判定 →（未结束时）疾病行动 → 判定 → 双方各摸一张 → 回合数 +1。
        医生的行动已结束对局时，疾病不再行动，也不再摸牌。

        Returns:
            本回合的结算报告；对局已结束时不做任何事并返回 None

        Raises:
            GameNotStartedError: 尚未开局
        """
        raise_if_game_not_started(self.state.value)
        if self.game_over:
            logger.warning("play_turn() called after game over (result=%s), ignored",
                           self.result.value)
            return None

        turn = self.turn
        self.event_bus.emit(EventType.TURN_START, turn=turn)
        self.log_event(_t("log.turn_start", turn=turn))

        doctor_record = self.resolve_doctor_action()
        if self._check_game_over():
            return self._finish_turn(turn, doctor_record, None)

        disease_record = self.resolve_disease_action()
        self._check_game_over()

        draw_count = self.config.draw_per_turn
        for player in (self.doctor, self.disease):
            drawn = player.draw_cards(draw_count)
            if drawn:
                self.event_bus.emit(EventType.CARDS_DRAWN, source=player, cards=drawn)

        self.turn += 1
        return self._finish_turn(turn, doctor_record, disease_record)

    def _finish_turn(self, turn: int, doctor_record: ActionRecord,
                     disease_record: Optional[ActionRecord]) -> TurnReport:
        report = TurnReport(
            turn=turn,
            doctor_action=doctor_record,
            disease_action=disease_record,
            result=self.result,
            game_over=self.game_over,
            doctor_health=self.doctor.health,
            disease_health=self.disease.health,
        )
        self.history.append(report)
        self.event_bus.emit(EventType.TURN_END, turn=turn, report=report)
        return report

    def _check_game_over(self) -> bool:
        """判定对局是否结束，结束时记录结果"""
        info = self.win_checker.check_game_over()
        if not info.is_over:
            return False

        self.result = info.result
        self.game_over_info = info
        self._fsm.transition(GameState.FINISHED)

        logger.info("Game over | result=%s turn=%d doctor=%d disease=%d",
                    info.result.value, self.turn, self.doctor.health, self.disease.health)
        self.event_bus.emit(EventType.GAME_END, result=info.result, info=info)
        self.log_event(info.message)
        if info.result == GameResult.WIN:
            self.log_event(_t("log.doctor_title", name=self.doctor.name, title=info.honor_title))
        elif info.result == GameResult.LOSE:
            self.log_event(_t("log.disease_title", name=self.disease.name, title=info.honor_title))
        return True

    # ==================== 行动结算 ====================

    def resolve_doctor_action(self, action: Optional[DoctorAction] = None) -> ActionRecord:
        """
        结算医生行动

        Args:
            action: 指定行动类型；为 None 时由医生策略选择

        Returns:
            行动记录
        """
        if action is None:
            action = self.doctor_strategy.choose_action(self.doctor, self)

        handlers = {
            DoctorAction.SINGLE_HERB: self._use_single_herb,
            DoctorAction.FORMULA: self._combine_formula,
            DoctorAction.ACUPOINT: self._use_acupoint,
        }
        return handlers[action]()

    def _use_single_herb(self) -> ActionRecord:
        """单味药：随机翻一张手牌，是药材才生效"""
        doctor = self.doctor
        kind = DoctorAction.SINGLE_HERB.value
        if not doctor.hand:
            return self._skip(doctor, kind, "empty_hand",
                              _t("log.skip.empty_hand", name=doctor.name))

        card = doctor.hand[self.rng.randrange(len(doctor.hand))]
        if card.card_type != CardType.HERB:
            return self._skip(doctor, kind, "not_herb",
                              _t("log.skip.not_herb", name=doctor.name, card=card.name))

        heal_amount = card.base_power * school_multiplier(doctor.school)
        damage = heal_amount // 2
        self._apply_heal(doctor, heal_amount)
        self._apply_damage(self.disease, damage, source=doctor)
        doctor.remove_card(card)

        record = ActionRecord(actor=doctor.role, kind=kind, cards=[card],
                              heal=heal_amount, damage=damage)
        self._announce(record, _t("log.single_herb", name=doctor.name, card=card.name,
                                  heal=heal_amount, damage=damage))
        return record

    def _combine_formula(self) -> ActionRecord:
        """合成方剂：按手牌顺序取前两味药材组成临时方剂"""
        doctor = self.doctor
        kind = DoctorAction.FORMULA.value
        herbs = doctor.cards_of(CardType.HERB)
        if len(herbs) < FORMULA_SIZE:
            return self._skip(doctor, kind, "not_enough_herbs",
                              _t("log.skip.not_enough_herbs", name=doctor.name, count=len(herbs)))

        selected = herbs[:FORMULA_SIZE]
        formula = FormulaCard(name=TEMP_FORMULA_NAME, herbs=tuple(selected))
        effect = formula.effect * school_multiplier(doctor.school)
        self._apply_heal(doctor, effect)
        self._apply_damage(self.disease, effect, source=doctor)
        doctor.remove_cards(selected)

        record = ActionRecord(actor=doctor.role, kind=kind, cards=list(selected),
                              composed=formula, heal=effect, damage=effect)
        self._announce(record, _t("log.formula", name=doctor.name, formula=formula.name,
                                  herbs="、".join(h.name for h in selected), effect=effect))
        return record

    def _use_acupoint(self) -> ActionRecord:
        """针刺：随机选一张穴位牌，固定两倍针力，不受流派影响"""
        doctor = self.doctor
        kind = DoctorAction.ACUPOINT.value
        points = doctor.cards_of(CardType.ACUPOINT)
        if not points:
            return self._skip(doctor, kind, "no_acupoint",
                              _t("log.skip.no_acupoint", name=doctor.name))

        point = points[self.rng.randrange(len(points))]
        damage = point.base_power * ACUPOINT_MULTIPLIER
        self._apply_damage(self.disease, damage, source=doctor)
        doctor.remove_card(point)

        record = ActionRecord(actor=doctor.role, kind=kind, cards=[point], damage=damage)
        self._announce(record, _t("log.acupoint", name=doctor.name, card=point.name,
                                  damage=damage))
        return record

    def resolve_disease_action(self) -> ActionRecord:
        """
        结算疾病行动：随机翻一张手牌，是症状牌才发作

        温病派发动“病”类症状时伤害 ×1.5（向零取整）。
        """
        disease = self.disease
        kind = "symptom"
        if not disease.hand:
            return self._skip(disease, kind, "empty_hand",
                              _t("log.skip.empty_hand", name=disease.name))

        card = disease.hand[self.rng.randrange(len(disease.hand))]
        if card.card_type != CardType.SYMPTOM:
            return self._skip(disease, kind, "not_symptom",
                              _t("log.skip.not_symptom", name=disease.name, card=card.name))

        damage = card.base_damage
        if disease.school == School.WARM_DISEASE and card.type == DiseaseType.ILLNESS:
            damage = int(damage * WARM_DISEASE_ILLNESS_MULTIPLIER)

        self._apply_damage(self.doctor, damage, source=disease)
        disease.remove_card(card)

        record = ActionRecord(actor=disease.role, kind=kind, cards=[card], damage=damage)
        self._announce(record, _t("log.symptom", name=disease.name, card=card.name,
                                  damage=damage))
        return record

    # ==================== 结算原语 ====================

    def _apply_heal(self, player: Player, amount: int) -> None:
        healed = player.heal(amount)
        self.event_bus.emit(EventType.HP_RECOVERED, target=player, amount=healed, requested=amount)

    def _apply_damage(self, target: Player, amount: int, source: Player) -> None:
        lost = target.take_damage(amount)
        self.event_bus.emit(EventType.DAMAGE_TAKEN, source=source, target=target,
                            amount=lost, requested=amount)

    def _skip(self, player: Player, kind: str, reason: str, message: str) -> ActionRecord:
        record = ActionRecord(actor=player.role, kind=kind, skipped=True, reason=reason)
        self.event_bus.emit(EventType.ACTION_SKIPPED, source=player, kind=kind, reason=reason)
        self.log_event(message)
        return record

    def _announce(self, record: ActionRecord, message: str) -> None:
        source = self.doctor if record.actor == PlayerRole.DOCTOR else self.disease
        self.event_bus.emit(EventType.CARD_PLAYED, source=source, cards=list(record.cards),
                            kind=record.kind, record=record)
        self.log_event(message)

    # ==================== 展示辅助 ====================

    def summary(self) -> Dict[str, Any]:
        """对局结束后的统计摘要"""
        return {
            "turn": self.turn,
            "result": self.result.value,
            "doctor_health": self.doctor.health,
            "disease_health": self.disease.health,
            "doctor_hand": self.doctor.hand_count,
            "disease_hand": self.disease.hand_count,
        }

    def to_dict(self) -> Dict[str, Any]:
        """完整状态快照（用于调试和展示）"""
        return {
            "state": self.state.value,
            "turn": self.turn,
            "game_over": self.game_over,
            "result": self.result.value,
            "doctor": self.doctor.to_dict(),
            "disease": self.disease.to_dict(),
            "case": self.current_case.to_dict() if self.current_case else None,
        }
