# -*- coding: utf-8 -*-
"""
事件总线系统
实现观察者模式，引擎只发布事件，展示层订阅后自行渲染
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .card import Card
    from .player import Player

logger = logging.getLogger(__name__)


class EventType(Enum):
    """游戏事件类型枚举"""
    # 对局
    GAME_START = auto()
    GAME_END = auto()

    # 回合
    TURN_START = auto()
    TURN_END = auto()

    # 卡牌
    CARD_PLAYED = auto()
    CARDS_DRAWN = auto()
    ACTION_SKIPPED = auto()

    # 正气/邪气
    HP_RECOVERED = auto()
    DAMAGE_TAKEN = auto()

    # 日志/UI
    LOG_MESSAGE = auto()


@dataclass
class GameEvent:
    """
    游戏事件数据类
    携带事件的所有相关信息
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    # 常用字段的快捷访问
    @property
    def source(self) -> Optional['Player']:
        return self.data.get('source')

    @property
    def target(self) -> Optional['Player']:
        return self.data.get('target')

    @property
    def cards(self) -> List['Card']:
        return self.data.get('cards', [])

    @property
    def amount(self) -> int:
        return self.data.get('amount', 0)

    @property
    def message(self) -> str:
        return self.data.get('message', '')


# 事件处理器类型
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    事件总线
    负责事件的发布和订阅，处理器按订阅顺序调用
    """

    def __init__(self):
        # 事件处理器映射：事件类型 -> 处理器列表
        self._handlers: Dict[EventType, List[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        订阅事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """取消订阅"""
        self._handlers[event_type] = [
            h for h in self._handlers[event_type] if h != handler
        ]

    def publish(self, event: GameEvent) -> GameEvent:
        """
        发布事件

        处理器抛出的异常会被记录而不会中断引擎结算。

        Args:
            event: 游戏事件

        Returns:
            发布的事件
        """
        for handler in list(self._handlers.get(event.event_type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("[EventBus] 处理器异常: %s", event.event_type.name)

        return event

    def emit(self, event_type: EventType, **kwargs) -> GameEvent:
        """
        快捷发布事件

        Args:
            event_type: 事件类型
            **kwargs: 事件数据

        Returns:
            发布的事件
        """
        event = GameEvent(event_type=event_type, data=kwargs)
        return self.publish(event)
