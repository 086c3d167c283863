"""卡牌系统模块
定义药材、穴位、症状三种基础牌，以及由它们组合而成的方剂、针法、综合征
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .enums import DiseaseType, HerbProperty, Rarity
from .exceptions import InvalidCardError, InvalidCompositionError


class CardType(Enum):
    """卡牌种类标签"""

    HERB = "herb"  # 药材
    ACUPOINT = "acupoint"  # 穴位
    SYMPTOM = "symptom"  # 症状
    FORMULA = "formula"  # 方剂
    NEEDLE_METHOD = "needle_method"  # 针法
    SYNDROME = "syndrome"  # 综合征

    @property
    def chinese_name(self) -> str:
        names = {
            CardType.HERB: "药材",
            CardType.ACUPOINT: "穴位",
            CardType.SYMPTOM: "症状",
            CardType.FORMULA: "方剂",
            CardType.NEEDLE_METHOD: "针法",
            CardType.SYNDROME: "综合征",
        }
        return names.get(self, "?")

    @property
    def is_composite(self) -> bool:
        """是否为组合牌"""
        return self in (CardType.FORMULA, CardType.NEEDLE_METHOD, CardType.SYNDROME)


def _new_card_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Card:
    """卡牌基类

    卡牌是不可变值对象：id 在构造时生成且不再改变，
    描述与衍生数值也只在构造时计算一次。

    Attributes:
        name: 卡牌名称
        id: 卡牌唯一标识符
        description: 卡牌描述（由各子类生成）
        level: 等级
        rarity: 稀有度
    """

    card_type: ClassVar[CardType]

    name: str
    id: str = field(init=False, default_factory=_new_card_id)
    description: str = field(init=False, default="")
    level: int = field(init=False, default=1)
    rarity: Rarity = field(init=False, default=Rarity.COMMON)

    def _set(self, attr: str, value: Any) -> None:
        object.__setattr__(self, attr, value)

    def is_type(self, card_type: CardType) -> bool:
        """检查是否为指定种类"""
        return self.card_type == card_type

    @property
    def display_name(self) -> str:
        return f"【{self.name}】"

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id[:8]}, {self.name})"

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于调试和展示）"""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.card_type.value,
            "description": self.description,
            "level": self.level,
            "rarity": self.rarity.value,
        }


def _check_positive(name: str, field_name: str, value: int) -> None:
    if value <= 0:
        raise InvalidCardError(name, field_name, value)


# ==================== 基础牌 ====================


@dataclass(frozen=True, repr=False)
class HerbCard(Card):
    """药材卡

    Attributes:
        property: 药性
        channel: 归经
        base_power: 基础药力
    """

    card_type: ClassVar[CardType] = CardType.HERB

    property: HerbProperty
    channel: str
    base_power: int

    def __post_init__(self):
        _check_positive(self.name, "base_power", self.base_power)
        if isinstance(self.property, str):
            self._set("property", HerbProperty(self.property))
        self._set(
            "description",
            f"{self.name}（{self.property.chinese_name}），归{self.channel}经",
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            property=self.property.value,
            channel=self.channel,
            base_power=self.base_power,
        )
        return data


@dataclass(frozen=True, repr=False)
class AcupointCard(Card):
    """穴位卡

    Attributes:
        meridian: 所属经络
        base_power: 基础针力
    """

    card_type: ClassVar[CardType] = CardType.ACUPOINT

    meridian: str
    base_power: int

    def __post_init__(self):
        _check_positive(self.name, "base_power", self.base_power)
        self._set("description", f"{self.name}（{self.meridian}）")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(meridian=self.meridian, base_power=self.base_power)
        return data


@dataclass(frozen=True, repr=False)
class SymptomCard(Card):
    """症状卡

    Attributes:
        type: 症状类型
        base_damage: 基础伤害
    """

    card_type: ClassVar[CardType] = CardType.SYMPTOM

    type: DiseaseType
    base_damage: int

    def __post_init__(self):
        _check_positive(self.name, "base_damage", self.base_damage)
        if isinstance(self.type, str):
            self._set("type", DiseaseType(self.type))
        self._set("description", f"{self.name}（{self.type.chinese_name}）")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(disease_type=self.type.value, base_damage=self.base_damage)
        return data


# ==================== 组合牌 ====================


def _check_components(name: str, components: tuple, expected: type) -> None:
    """组合牌的组成必须非空，且全部为同一种基础牌"""
    if not components:
        raise InvalidCompositionError(card_name=name, component_count=0)
    for component in components:
        if not isinstance(component, expected):
            raise InvalidCompositionError(
                f"{name}: {component!r} 不是 {expected.__name__}",
                card_name=name,
                component_count=len(components),
            )


@dataclass(frozen=True, repr=False)
class FormulaCard(Card):
    """方剂卡

    由若干药材组成，疗效 = 组成药材药力之和 × 2，等级 = 药材数量。
    """

    card_type: ClassVar[CardType] = CardType.FORMULA

    herbs: tuple[HerbCard, ...]
    effect: int = field(init=False, default=0)

    def __post_init__(self):
        herbs = tuple(self.herbs)
        _check_components(self.name, herbs, HerbCard)
        self._set("herbs", herbs)
        self._set("effect", sum(h.base_power for h in herbs) * 2)
        self._set("level", len(herbs))
        self._set("rarity", Rarity.RARE)
        self._set("description", f"{self.name}：由{'、'.join(h.name for h in herbs)}组成")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(effect=self.effect, herbs=[h.name for h in self.herbs])
        return data


@dataclass(frozen=True, repr=False)
class NeedleMethodCard(Card):
    """针法卡

    由若干穴位组成，疗效 = 穴位针力之和 × 3。当前回合逻辑不会产生此牌。
    """

    card_type: ClassVar[CardType] = CardType.NEEDLE_METHOD

    acupoints: tuple[AcupointCard, ...]
    effect: int = field(init=False, default=0)

    def __post_init__(self):
        acupoints = tuple(self.acupoints)
        _check_components(self.name, acupoints, AcupointCard)
        self._set("acupoints", acupoints)
        self._set("effect", sum(a.base_power for a in acupoints) * 3)
        self._set("level", len(acupoints))
        self._set("rarity", Rarity.RARE)
        self._set("description", f"{self.name}针法：{'、'.join(a.name for a in acupoints)}")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(effect=self.effect, acupoints=[a.name for a in self.acupoints])
        return data


@dataclass(frozen=True, repr=False)
class SyndromeCard(Card):
    """综合征卡

    由若干症状组成，伤害 = 症状基础伤害之和 × 2。当前回合逻辑不会产生此牌。
    """

    card_type: ClassVar[CardType] = CardType.SYNDROME

    symptoms: tuple[SymptomCard, ...]
    damage: int = field(init=False, default=0)

    def __post_init__(self):
        symptoms = tuple(self.symptoms)
        _check_components(self.name, symptoms, SymptomCard)
        self._set("symptoms", symptoms)
        self._set("damage", sum(s.base_damage for s in symptoms) * 2)
        self._set("level", len(symptoms))
        self._set("rarity", Rarity.RARE)
        self._set("description", f"{self.name}综合征：{'、'.join(s.name for s in symptoms)}")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(damage=self.damage, symptoms=[s.name for s in self.symptoms])
        return data
