"""医案模块
描述本局模拟患者的临床表现，仅供展示，引擎逻辑不会修改它
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .card import SymptomCard


@dataclass(frozen=True)
class MedicalCase:
    """医案

    Attributes:
        description: 病情描述
        symptoms: 主要表现（症状牌，仅作展示）
        tongue: 舌象
        pulse: 脉象
    """

    description: str
    symptoms: tuple[SymptomCard, ...] = field(default_factory=tuple)
    tongue: str = ""
    pulse: str = ""

    def __post_init__(self):
        object.__setattr__(self, "symptoms", tuple(self.symptoms))

    @property
    def symptom_summary(self) -> str:
        """主要表现的一行摘要，如 ``发热(病) 咳嗽(病)``"""
        return " ".join(f"{s.name}({s.type.chinese_name})" for s in self.symptoms)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "tongue": self.tongue,
            "pulse": self.pulse,
            "symptoms": [s.name for s in self.symptoms],
        }

    def __str__(self) -> str:
        return self.description
