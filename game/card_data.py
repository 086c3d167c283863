"""起始牌组数据仓库
从 data/cards.json 读取双方起始牌组与医案模板，每次开局生成全新的卡牌实例
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .card import AcupointCard, Card, HerbCard, SymptomCard
from .exceptions import DataLoadError, InvalidCardError
from .medical_case import MedicalCase

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent.parent / "data" / "cards.json"


def card_from_dict(data: dict[str, Any]) -> Card:
    """根据字典创建一张基础牌

    Args:
        data: 形如 ``{"type": "herb", "name": ..., ...}`` 的卡牌数据

    Raises:
        DataLoadError: 卡牌种类未知或字段缺失
    """
    card_type = data.get("type")
    try:
        if card_type == "herb":
            return HerbCard(
                name=data["name"],
                property=data["property"],
                channel=data["channel"],
                base_power=int(data["base_power"]),
            )
        if card_type == "acupoint":
            return AcupointCard(
                name=data["name"],
                meridian=data["meridian"],
                base_power=int(data["base_power"]),
            )
        if card_type == "symptom":
            return SymptomCard(
                name=data["name"],
                type=data["disease_type"],
                base_damage=int(data["base_damage"]),
            )
    except (KeyError, ValueError, TypeError, InvalidCardError) as e:
        raise DataLoadError(reason=f"卡牌数据无效: {data!r} ({e})") from e
    raise DataLoadError(reason=f"未知卡牌种类: {card_type!r}")


class CardRepository:
    """起始数据仓库

    JSON 只在构造时读取一次；create_* 方法每次调用都返回新的卡牌对象，
    因此不同对局之间不会共享卡牌。
    """

    def __init__(self, data_path: str | Path | None = None):
        self.data_path = Path(data_path) if data_path else DEFAULT_DATA_PATH
        self._data: dict[str, Any] = self._load(self.data_path)

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        if not path.exists():
            raise DataLoadError(file_path=str(path), reason="文件不存在")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DataLoadError(file_path=str(path), reason=str(e)) from e

        for key in ("doctor_deck", "disease_deck", "medical_case"):
            if key not in data:
                raise DataLoadError(file_path=str(path), reason=f"缺少字段 {key}")

        logger.debug(
            "Loaded starter data from %s (doctor=%d, disease=%d)",
            path,
            len(data["doctor_deck"]),
            len(data["disease_deck"]),
        )
        return data

    def create_doctor_deck(self) -> list[Card]:
        """生成医生起始牌组（未洗牌）"""
        return [card_from_dict(d) for d in self._data["doctor_deck"]]

    def create_disease_deck(self) -> list[Card]:
        """生成疾病起始牌组（未洗牌）"""
        return [card_from_dict(d) for d in self._data["disease_deck"]]

    def create_medical_case(self) -> MedicalCase:
        """生成本局医案"""
        case = self._data["medical_case"]
        symptoms = []
        for d in case.get("symptoms", []):
            card = card_from_dict(d)
            if not isinstance(card, SymptomCard):
                raise DataLoadError(
                    file_path=str(self.data_path), reason=f"医案表现必须是症状牌: {d!r}"
                )
            symptoms.append(card)
        return MedicalCase(
            description=case.get("description", ""),
            symptoms=tuple(symptoms),
            tongue=case.get("tongue", ""),
            pulse=case.get("pulse", ""),
        )
