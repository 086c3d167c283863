# -*- coding: utf-8 -*-
"""
医战游戏核心模块
包含卡牌、玩家、医案、回合引擎、胜负判定、事件系统和六经辨证小游戏
"""

from .card import (
    Card, CardType, HerbCard, AcupointCard, SymptomCard,
    FormulaCard, NeedleMethodCard, SyndromeCard,
)
from .enums import (
    PlayerRole, School, HerbProperty, DiseaseType, Rarity,
    GameResult, GameState, DoctorAction,
)
from .player import Player
from .medical_case import MedicalCase
from .engine import GameEngine, ActionRecord, TurnReport
from .events import EventBus, EventType, GameEvent
from .diagnosis import SixChannelGame, TreatmentOutcome, Channel

__all__ = [
    # 卡牌系统
    'Card', 'CardType', 'HerbCard', 'AcupointCard', 'SymptomCard',
    'FormulaCard', 'NeedleMethodCard', 'SyndromeCard',
    # 枚举
    'PlayerRole', 'School', 'HerbProperty', 'DiseaseType', 'Rarity',
    'GameResult', 'GameState', 'DoctorAction',
    # 玩家与医案
    'Player', 'MedicalCase',
    # 游戏引擎
    'GameEngine', 'ActionRecord', 'TurnReport',
    # 事件系统
    'EventBus', 'EventType', 'GameEvent',
    # 六经辨证
    'SixChannelGame', 'TreatmentOutcome', 'Channel',
]

__version__ = '1.0.0'
__author__ = 'Yizhan Dev Team'
