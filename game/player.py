# -*- coding: utf-8 -*-
"""
玩家系统模块
定义对战双方的状态：正气/邪气值、牌组、手牌及其变更原语
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

from .enums import PlayerRole, School

if TYPE_CHECKING:
    from .card import Card, CardType


DEFAULT_MAX_HEALTH = 100


@dataclass(eq=False)
class Player:
    """
    玩家类

    医生一方的 health 表示正气，疾病一方表示邪气。

    Attributes:
        name: 玩家名称
        role: 角色（医生/疾病）
        school: 流派
        level: 等级
        title: 称号（由角色决定）
        health: 当前正气/邪气值
        max_health: 上限
        hand: 手牌（按摸牌顺序）
        deck: 牌组（洗牌后的摸牌顺序，队首先摸）
    """
    name: str
    role: PlayerRole
    school: School
    level: int = 1
    title: str = ""
    max_health: int = DEFAULT_MAX_HEALTH
    health: Optional[int] = None
    hand: List['Card'] = field(default_factory=list)
    deck: List['Card'] = field(default_factory=list)

    def __post_init__(self):
        """初始化后处理"""
        if isinstance(self.role, str):
            self.role = PlayerRole(self.role)
        if isinstance(self.school, str):
            self.school = School(self.school)
        if not self.title:
            self.title = self.role.initial_title
        if self.health is None:
            self.health = self.max_health
        self.health = max(0, min(self.health, self.max_health))

    def draw_cards(self, count: int) -> List['Card']:
        """
        从牌组队首摸至多 count 张牌放到手牌末尾

        牌组耗尽时提前停止，不视为错误。

        Args:
            count: 摸牌数量

        Returns:
            实际摸到的卡牌列表
        """
        drawn = []
        for _ in range(count):
            if not self.deck:
                break
            drawn.append(self.deck.pop(0))
        self.hand.extend(drawn)
        return drawn

    def take_damage(self, amount: int) -> int:
        """
        受到伤害，正气/邪气最低降至 0

        Args:
            amount: 伤害值（调用方保证非负）

        Returns:
            实际损失量
        """
        old_health = self.health
        self.health = max(0, self.health - amount)
        return old_health - self.health

    def heal(self, amount: int) -> int:
        """
        回复，最高不超过上限

        Args:
            amount: 回复量（调用方保证非负）

        Returns:
            实际回复量
        """
        old_health = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - old_health

    def remove_card(self, card: 'Card') -> bool:
        """
        从手牌中移除一张卡牌

        Args:
            card: 要移除的卡牌

        Returns:
            是否成功移除
        """
        if card in self.hand:
            self.hand.remove(card)
            return True
        return False

    def remove_cards(self, cards: List['Card']) -> List['Card']:
        """
        从手牌中移除多张卡牌

        Args:
            cards: 要移除的卡牌列表

        Returns:
            成功移除的卡牌列表
        """
        removed = []
        for card in cards:
            if self.remove_card(card):
                removed.append(card)
        return removed

    def cards_of(self, card_type: 'CardType') -> List['Card']:
        """按手牌顺序获取指定种类的牌"""
        return [c for c in self.hand if c.card_type == card_type]

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def is_doctor(self) -> bool:
        return self.role == PlayerRole.DOCTOR

    @property
    def hand_count(self) -> int:
        """获取手牌数量"""
        return len(self.hand)

    @property
    def deck_count(self) -> int:
        """获取牌组剩余数量"""
        return len(self.deck)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于调试）"""
        return {
            "name": self.name,
            "role": self.role.value,
            "school": self.school.value,
            "level": self.level,
            "title": self.title,
            "health": self.health,
            "max_health": self.max_health,
            "hand": [c.name for c in self.hand],
            "deck_count": self.deck_count,
        }

    def __str__(self) -> str:
        return f"[{self.name}] {self.role.chinese_name}·{self.school.chinese_name} {self.health}/{self.max_health} 手牌:{self.hand_count}"

    def __repr__(self) -> str:
        return f"Player({self.name}, {self.role.value})"
