"""胜负判定模块
负责判定对局结束条件并确定结果（以医生视角）

判定本身是纯函数 evaluate_termination()，便于独立测试；
WinConditionChecker 只是把引擎当前状态喂给它。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18n import t as _t

from .enums import GameResult

if TYPE_CHECKING:
    from .engine import GameEngine

DEFAULT_MAX_TURNS = 10


@dataclass(slots=True)
class GameOverInfo:
    """对局结束信息"""

    is_over: bool
    result: GameResult
    message: str
    honor_title: str | None = None  # 胜方获得的称号


def evaluate_termination(
    doctor_health: int,
    disease_health: int,
    turn: int,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> GameOverInfo:
    """判定对局是否结束

    检查顺序有意义：双方同时归零时判医生落败，而不是平局。

    Args:
        doctor_health: 医生正气
        disease_health: 疾病邪气
        turn: 当前回合数
        max_turns: 回合上限，回合数超过上限判平局

    Returns:
        GameOverInfo: 对局结束信息
    """
    if doctor_health <= 0:
        return GameOverInfo(
            is_over=True,
            result=GameResult.LOSE,
            message=_t("game.over_lose"),
            honor_title=_t("title.disease_win"),
        )

    if disease_health <= 0:
        return GameOverInfo(
            is_over=True,
            result=GameResult.WIN,
            message=_t("game.over_win"),
            honor_title=_t("title.doctor_win"),
        )

    if turn > max_turns:
        return GameOverInfo(is_over=True, result=GameResult.DRAW, message=_t("game.over_draw"))

    return GameOverInfo(is_over=False, result=GameResult.PENDING, message="")


class WinConditionChecker:
    """胜负条件检查器"""

    def __init__(self, engine: GameEngine, max_turns: int = DEFAULT_MAX_TURNS):
        """初始化胜负条件检查器

        Args:
            engine: 游戏引擎引用
            max_turns: 回合上限
        """
        self.engine = engine
        self.max_turns = max_turns

    def check_game_over(self) -> GameOverInfo:
        """按引擎当前状态检查对局是否结束"""
        return evaluate_termination(
            self.engine.doctor.health,
            self.engine.disease.health,
            self.engine.turn,
            self.max_turns,
        )

    def is_game_over(self) -> bool:
        return self.check_game_over().is_over


def result_message(result: GameResult) -> str:
    """获取对局结果的描述"""
    messages = {
        GameResult.WIN: _t("game.over_win"),
        GameResult.LOSE: _t("game.over_lose"),
        GameResult.DRAW: _t("game.over_draw"),
    }
    return messages.get(result, _t("game.in_progress"))
