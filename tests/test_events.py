"""
事件系统单元测试
测试 EventBus、GameEvent 和相关功能
"""

import random
import sys
from pathlib import Path

# 确保可以导入项目模块
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.engine import GameEngine
from game.enums import PlayerRole, School
from game.events import EventBus, EventType, GameEvent
from game.player import Player


class TestEventBus:
    """事件总线测试"""

    def setup_method(self):
        """每个测试前重置"""
        self.bus = EventBus()
        self.received_events = []

    def test_subscribe_and_publish(self):
        """测试订阅和发布事件"""
        def handler(event):
            self.received_events.append(event)

        self.bus.subscribe(EventType.LOG_MESSAGE, handler)
        self.bus.emit(EventType.LOG_MESSAGE, message="测试消息")

        assert len(self.received_events) == 1
        assert self.received_events[0].message == "测试消息"

    def test_subscription_order(self):
        """测试按订阅顺序调用"""
        order = []

        self.bus.subscribe(EventType.GAME_START, lambda e: order.append("first"))
        self.bus.subscribe(EventType.GAME_START, lambda e: order.append("second"))

        self.bus.emit(EventType.GAME_START)

        assert order == ["first", "second"]

    def test_only_matching_type(self):
        """测试只调用对应类型的处理器"""
        self.bus.subscribe(EventType.TURN_START, self.received_events.append)

        self.bus.emit(EventType.TURN_END, turn=1)
        self.bus.emit(EventType.TURN_START, turn=2)

        assert [e.event_type for e in self.received_events] == [EventType.TURN_START]

    def test_unsubscribe(self):
        """测试取消订阅"""
        def handler(event):
            self.received_events.append(event)

        self.bus.subscribe(EventType.LOG_MESSAGE, handler)
        self.bus.emit(EventType.LOG_MESSAGE, message="第一条")

        self.bus.unsubscribe(EventType.LOG_MESSAGE, handler)
        self.bus.emit(EventType.LOG_MESSAGE, message="第二条")

        assert len(self.received_events) == 1

    def test_unsubscribe_unknown_handler(self):
        """测试取消未订阅的处理器不报错"""
        self.bus.unsubscribe(EventType.GAME_END, self.received_events.append)
        self.bus.emit(EventType.GAME_END)
        assert self.received_events == []

    def test_handler_error_does_not_stop_others(self):
        """测试处理器异常不影响其他处理器"""
        def broken(event):
            raise RuntimeError("boom")

        self.bus.subscribe(EventType.DAMAGE_TAKEN, broken)
        self.bus.subscribe(EventType.DAMAGE_TAKEN, self.received_events.append)

        event = self.bus.emit(EventType.DAMAGE_TAKEN, amount=3)

        assert self.received_events == [event]

    def test_engine_emits_lifecycle_events(self):
        """测试引擎通过总线发布对局事件"""
        doctor = Player(name="张仲景", role=PlayerRole.DOCTOR, school=School.CLASSICAL_FORMULA)
        disease = Player(name="温邪", role=PlayerRole.DISEASE, school=School.WARM_DISEASE)
        engine = GameEngine(doctor, disease, random.Random(5), event_bus=self.bus)
        self.bus.subscribe(EventType.GAME_START, self.received_events.append)
        self.bus.subscribe(EventType.TURN_START, self.received_events.append)

        engine.start_game()
        engine.play_turn()

        assert [e.event_type for e in self.received_events] == [
            EventType.GAME_START, EventType.TURN_START]
        assert self.received_events[1].data["turn"] == 1


class TestGameEvent:
    """游戏事件测试"""

    def test_event_properties(self):
        """测试事件属性"""
        event = GameEvent(
            event_type=EventType.DAMAGE_TAKEN,
            data={
                "source": "doctor",
                "target": "disease",
                "amount": 20,
                "message": "造成伤害"
            }
        )

        assert event.source == "doctor"
        assert event.target == "disease"
        assert event.amount == 20
        assert event.message == "造成伤害"

    def test_defaults(self):
        """测试缺省字段"""
        event = GameEvent(event_type=EventType.CARD_PLAYED)
        assert event.cards == []
        assert event.amount == 0
        assert event.message == ""
        assert event.source is None
