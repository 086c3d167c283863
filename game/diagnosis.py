# -*- coding: utf-8 -*-
"""
六经辨证小游戏
先根据症状辨出病位，再选方治疗；病邪每两回合沿六经传变一次。

独立于医战引擎，只共享结果枚举、异常和事件日志约定。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from i18n import t as _t

from .enums import GameResult
from .exceptions import GameAlreadyFinishedError

logger = logging.getLogger(__name__)

INITIAL_SEVERITY = 60
MAX_SEVERITY = 100
MAX_TURNS = 15
WRONG_FORMULA_PENALTY = 10
NATURAL_PROGRESSION = 5
DEFAULT_POTENCY = 10


class Channel(Enum):
    """六经（按传变顺序）"""

    TAIYANG = "太阳"
    YANGMING = "阳明"
    SHAOYANG = "少阳"
    TAIYIN = "太阴"
    SHAOYIN = "少阴"
    JUEYIN = "厥阴"

    @property
    def chinese_name(self) -> str:
        return self.value

    @property
    def next_channel(self) -> Optional['Channel']:
        """传变的下一经，厥阴为最后一经"""
        order = list(Channel)
        index = order.index(self)
        if index + 1 < len(order):
            return order[index + 1]
        return None


# 各经主方
CORRECT_FORMULAS: Dict[Channel, str] = {
    Channel.TAIYANG: "桂枝汤",
    Channel.YANGMING: "白虎汤",
    Channel.SHAOYANG: "小柴胡汤",
    Channel.TAIYIN: "理中丸",
    Channel.SHAOYIN: "四逆汤",
    Channel.JUEYIN: "乌梅丸",
}

FORMULA_POTENCY: Dict[str, int] = {
    "桂枝汤": 20,
    "白虎汤": 25,
    "小柴胡汤": 18,
    "理中丸": 15,
    "四逆汤": 22,
    "乌梅丸": 16,
}

# 可供选择的典型症状
SYMPTOMS: List[str] = ["恶寒发热", "但热不寒", "寒热往来", "腹满而吐", "脉微细"]


def channel_for_symptom(symptom: str) -> Channel:
    """
    简单的六经辨证

    按关键词匹配，无法辨识的症状一律归为太阳病。
    """
    if "恶寒" in symptom and "发热" in symptom:
        return Channel.TAIYANG
    if "但热不寒" in symptom:
        return Channel.YANGMING
    if "寒热往来" in symptom:
        return Channel.SHAOYANG
    if "腹满" in symptom and "吐" in symptom:
        return Channel.TAIYIN
    if "脉微细" in symptom:
        return Channel.SHAOYIN
    return Channel.TAIYANG


def formula_potency(formula: str) -> int:
    return FORMULA_POTENCY.get(formula, DEFAULT_POTENCY)


@dataclass(slots=True)
class TreatmentOutcome:
    """一次治疗的结果"""
    formula: str
    channel: Channel
    correct: bool
    potency: int
    severity_before: int
    severity: int
    turn: int
    transmitted_to: Optional[Channel]
    result: GameResult
    messages: List[str]

    @property
    def game_over(self) -> bool:
        return self.result != GameResult.PENDING


class SixChannelGame:
    """
    六经辨证小游戏

    Attributes:
        channel: 当前病位
        severity: 病情严重度（0-100）
        turn: 当前回合
        result: 结果（PENDING 表示进行中）
        log: 辨证与治疗记录
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """重新开始"""
        self.channel: Channel = Channel.TAIYANG
        self.severity: int = INITIAL_SEVERITY
        self.turn: int = 1
        self.result: GameResult = GameResult.PENDING
        self.log: List[str] = []
        self._add_log(_t("diag.new_game"))

    @property
    def game_over(self) -> bool:
        return self.result != GameResult.PENDING

    def _add_log(self, message: str) -> None:
        logger.debug(message)
        self.log.append(message)

    def _ensure_running(self) -> None:
        if self.game_over:
            raise GameAlreadyFinishedError()

    def diagnose(self, symptom: str) -> Channel:
        """
        根据症状辨证，更新当前病位

        Raises:
            GameAlreadyFinishedError: 游戏已结束
        """
        self._ensure_running()
        self.channel = channel_for_symptom(symptom)
        self._add_log(_t("diag.diagnose", symptom=symptom, channel=self.channel.chinese_name))
        return self.channel

    def treat(self, formula: str) -> TreatmentOutcome:
        """
        用指定方剂治疗当前病位

        方证对应则按方剂疗效减轻病情，否则病情加重；
        未治愈时病情再自然进展，回合数 +1，偶数回合病邪传入下一经。

        Raises:
            GameAlreadyFinishedError: 游戏已结束
        """
        self._ensure_running()

        treated = self.channel
        before = self.severity
        potency = formula_potency(formula)
        correct = formula == CORRECT_FORMULAS[treated]
        messages = []

        if correct:
            self.severity = max(0, self.severity - potency)
            messages.append(_t("diag.correct", formula=formula,
                               channel=treated.chinese_name, potency=potency))
        else:
            self.severity = min(MAX_SEVERITY, self.severity + WRONG_FORMULA_PENALTY)
            messages.append(_t("diag.wrong", formula=formula, channel=treated.chinese_name))

        # 治愈后不再自然进展
        if self.severity > 0:
            self.severity = min(MAX_SEVERITY, self.severity + NATURAL_PROGRESSION)
        self.turn += 1

        transmitted_to = None
        next_channel = self.channel.next_channel
        if next_channel is not None and self.turn % 2 == 0:
            messages.append(_t("diag.transmit", old=self.channel.chinese_name,
                               new=next_channel.chinese_name))
            self.channel = next_channel
            transmitted_to = next_channel

        if self.severity <= 0:
            self.result = GameResult.WIN
            messages.append(_t("diag.cured"))
        elif self.severity >= MAX_SEVERITY or self.turn > MAX_TURNS:
            self.result = GameResult.LOSE
            messages.append(_t("diag.failed"))

        for message in messages:
            self._add_log(message)
        if self.game_over:
            logger.info("Six-channel game over | result=%s turn=%d severity=%d",
                        self.result.value, self.turn, self.severity)

        return TreatmentOutcome(
            formula=formula,
            channel=treated,
            correct=correct,
            potency=potency,
            severity_before=before,
            severity=self.severity,
            turn=self.turn,
            transmitted_to=transmitted_to,
            result=self.result,
            messages=messages,
        )
