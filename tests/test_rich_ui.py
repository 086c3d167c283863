"""
Rich TUI tests
Render into an in-memory console and feed menu input via monkeypatch.
"""

import io
import random

import pytest
from rich.console import Console

from ai.strategy import FixedStrategy
from game.config import GameConfig
from game.diagnosis import SixChannelGame
from game.engine import GameEngine
from game.enums import DoctorAction, PlayerRole, School
from game.player import Player
from ui.rich_ui import DOCTOR_SCHOOLS, RichTerminalUI


def make_ui():
    console = Console(file=io.StringIO(), width=120, color_system=None)
    return RichTerminalUI(console=console)


def output(ui):
    return ui.console.file.getvalue()


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def make_engine(**kwargs):
    doctor = Player(name="张仲景", role=PlayerRole.DOCTOR, school=School.GOLDEN_NEEDLE)
    disease = Player(name="温邪", role=PlayerRole.DISEASE, school=School.WARM_DISEASE)
    return GameEngine(doctor, disease, rng=random.Random(1), config=GameConfig(seed=1), **kwargs)


class TestMenus:
    def test_main_menu_retries_invalid(self, monkeypatch):
        ui = make_ui()
        feed_input(monkeypatch, ["9", "abc", "2"])
        assert ui.show_main_menu() == 2
        assert "无效选择" in output(ui)

    def test_school_menu(self, monkeypatch):
        ui = make_ui()
        feed_input(monkeypatch, ["2"])
        assert ui.show_school_menu() == DOCTOR_SCHOOLS[1] == School.GOLDEN_NEEDLE

    def test_warm_disease_not_offered(self):
        assert School.WARM_DISEASE not in DOCTOR_SCHOOLS

    def test_rules(self, monkeypatch):
        ui = make_ui()
        feed_input(monkeypatch, [""])
        ui.show_rules()
        assert "六经辨证" in output(ui)


class TestBattleRendering:
    def test_show_game_state(self):
        ui = make_ui()
        engine = make_engine()
        ui.set_engine(engine)
        engine.start_game()
        ui.show_game_state(engine)
        text = output(ui)
        assert "张仲景" in text
        assert "温邪" in text

    def test_log_messages_collected(self):
        ui = make_ui()
        engine = make_engine()
        ui.set_engine(engine)
        engine.start_game()
        engine.play_turn()
        assert ui.log_messages
        assert any("医战开始" in m for m in ui.log_messages)

    def test_rebinding_engine_unsubscribes(self):
        ui = make_ui()
        first = make_engine()
        ui.set_engine(first)
        ui.set_engine(make_engine())
        first.log_event("旧引擎")
        assert "旧引擎" not in ui.log_messages

    def test_show_message_prints_without_logging(self):
        ui = make_ui()
        ui.show_message("告辞")
        assert "告辞" in output(ui)
        assert ui.log_messages == []

    def test_render_case_none(self):
        ui = make_ui()
        ui.console.print(ui.render_case(None))
        assert "医案" in output(ui)

    def test_game_over_summary(self):
        ui = make_ui()
        engine = make_engine(doctor_strategy=FixedStrategy(DoctorAction.ACUPOINT))
        ui.set_engine(engine)
        engine.start_game()
        while not engine.game_over:
            engine.play_turn()
        ui.show_game_over(engine)
        text = output(ui)
        assert f"/{engine.doctor.max_health}" in text
        assert engine.game_over_info.message in text


class TestDiagnosisScreens:
    def test_choose_symptom_cancel(self, monkeypatch):
        ui = make_ui()
        feed_input(monkeypatch, ["0"])
        assert ui.choose_symptom(["恶寒发热", "但热不寒"]) is None

    def test_choose_formula(self, monkeypatch):
        ui = make_ui()
        feed_input(monkeypatch, ["7", "1"])
        assert ui.choose_formula(["桂枝汤", "白虎汤"]) == "桂枝汤"

    def test_show_state_and_treatment(self):
        ui = make_ui()
        game = SixChannelGame()
        outcome = game.treat("桂枝汤")
        ui.show_diagnosis_state(game)
        ui.show_treatment(outcome)
        text = output(ui)
        assert "阳明" in text
        assert "45/100" in text


@pytest.fixture(autouse=True)
def _zh_locale():
    from i18n import get_locale, set_locale
    original = get_locale()
    set_locale("zh_CN")
    yield
    set_locale(original)


class TestGameUIProtocol:
    """RichTerminalUI 结构上满足 GameUI 协议"""

    def test_gameui_inherits_sub_protocols(self):
        from ui.protocol import GameDisplay, GameInput, GameNotify, GameUI
        # Protocol 不支持运行时 issubclass，通过 MRO 检查继承关系
        mro = GameUI.__mro__
        assert GameDisplay in mro
        assert GameInput in mro
        assert GameNotify in mro

    def test_rich_ui_has_protocol_methods(self):
        from ui.protocol import GameDisplay, GameInput, GameNotify
        ui = make_ui()
        for proto in (GameDisplay, GameInput, GameNotify):
            for name, member in vars(proto).items():
                if callable(member) and not name.startswith("_"):
                    assert callable(getattr(ui, name, None)), f"RichTerminalUI missing: {name}"
