"""Tests for game.exceptions module — all exception classes and helpers."""

import pytest

from game.exceptions import (
    ConfigurationError,
    DataLoadError,
    GameAlreadyFinishedError,
    GameAlreadyStartedError,
    GameError,
    GameNotStartedError,
    GameStateError,
    InvalidCompositionError,
    InvalidReplayError,
    raise_if_game_not_started,
)

# ==================== GameError base ====================

class TestGameError:
    def test_basic(self):
        e = GameError("test")
        assert e.message == "test"
        assert e.details == {}
        assert str(e) == "test"

    def test_with_details(self):
        e = GameError("err", details={"key": "val"})
        assert e.details == {"key": "val"}
        assert "Details:" in str(e)

    def test_is_exception(self):
        with pytest.raises(GameError):
            raise GameError("boom")


# ==================== Card errors ====================

class TestInvalidCompositionError:
    def test_defaults(self):
        e = InvalidCompositionError()
        assert "组合牌" in e.message
        assert e.card_name is None
        assert e.details == {"component_count": 0}

    def test_with_params(self):
        e = InvalidCompositionError("bad", card_name="空方", component_count=2)
        assert e.card_name == "空方"
        assert e.details["card_name"] == "空方"
        assert e.details["component_count"] == 2

    def test_inherits_game_error(self):
        assert issubclass(InvalidCompositionError, GameError)


# ==================== State errors ====================

class TestGameStateErrors:
    def test_state_error_details(self):
        e = GameStateError("bad", current_state="finished", expected_state="in_progress")
        assert e.details == {"current_state": "finished", "expected_state": "in_progress"}

    def test_not_started(self):
        e = GameNotStartedError()
        assert e.current_state == "not_started"
        assert isinstance(e, GameStateError)

    def test_already_finished(self):
        e = GameAlreadyFinishedError()
        assert e.current_state == "finished"
        assert "结束" in e.message

    def test_already_started_is_replay_error(self):
        e = GameAlreadyStartedError(current_state="in_progress")
        assert isinstance(e, InvalidReplayError)
        assert isinstance(e, GameStateError)
        assert e.expected_state == "not_started"
        assert e.current_state == "in_progress"

    def test_replay_default_message(self):
        assert InvalidReplayError().message


# ==================== Config / data errors ====================

class TestConfigAndDataErrors:
    def test_configuration_error(self):
        e = ConfigurationError(config_key="max_turns")
        assert e.config_key == "max_turns"
        assert e.details == {"config_key": "max_turns"}

    def test_data_load_error(self):
        e = DataLoadError(file_path="cards.json", reason="missing")
        assert e.file_path == "cards.json"
        assert e.details == {"file_path": "cards.json", "reason": "missing"}


# ==================== Helpers ====================

class TestHelpers:
    def test_raise_if_not_started(self):
        with pytest.raises(GameNotStartedError):
            raise_if_game_not_started("not_started")
        raise_if_game_not_started("in_progress")
