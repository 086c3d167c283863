"""医生行动策略协议与内置实现

引擎每回合向策略询问医生的行动类型，具体出哪张牌仍由引擎结算。
当前只有均匀随机策略；固定策略用于脚本化对局与测试。
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from game.enums import DoctorAction

if TYPE_CHECKING:
    from game.engine import GameEngine
    from game.player import Player

# 随机策略按此顺序映射 randrange(3) 的结果
ACTION_ORDER: tuple[DoctorAction, ...] = (
    DoctorAction.SINGLE_HERB,
    DoctorAction.FORMULA,
    DoctorAction.ACUPOINT,
)


class DoctorStrategy(Protocol):
    """医生行动策略协议"""

    def choose_action(self, doctor: Player, engine: GameEngine) -> DoctorAction:
        """选择本回合的行动类型"""
        ...


class RandomStrategy:
    """随机策略：三种行动各 1/3 概率，不看手牌"""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def choose_action(self, doctor: Player, engine: GameEngine) -> DoctorAction:
        return ACTION_ORDER[self.rng.randrange(len(ACTION_ORDER))]


class FixedStrategy:
    """固定策略：每回合都选同一种行动"""

    def __init__(self, action: DoctorAction):
        self.action = action

    def choose_action(self, doctor: Player, engine: GameEngine) -> DoctorAction:
        return self.action
