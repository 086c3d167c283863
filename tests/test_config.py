"""Configuration tests: defaults, env overrides and validation."""

import pytest

from game.config import GameConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()


class TestConfigDefaults:
    def test_rule_defaults(self, monkeypatch):
        for key in ("YIZHAN_SEED", "YIZHAN_TURN_DELAY", "YIZHAN_LANG", "YIZHAN_DEBUG"):
            monkeypatch.delenv(key, raising=False)
        cfg = GameConfig()
        assert cfg.max_turns == 10
        assert cfg.initial_hand_size == 5
        assert cfg.draw_per_turn == 1
        assert cfg.max_health == 100
        assert cfg.turn_delay == 1.5
        assert cfg.seed is None
        assert cfg.locale == "zh_CN"
        assert cfg.debug_mode is False

    def test_is_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.max_turns = 3

    def test_dict_style_get(self):
        cfg = GameConfig()
        assert cfg.get("max_turns") == 10
        assert cfg.get("no_such_key", "fallback") == "fallback"


class TestEnvOverrides:
    def test_seed_from_env(self, monkeypatch):
        monkeypatch.setenv("YIZHAN_SEED", "42")
        assert GameConfig().seed == 42

    def test_invalid_seed_ignored(self, monkeypatch):
        monkeypatch.setenv("YIZHAN_SEED", "abc")
        assert GameConfig().seed is None

    def test_turn_delay_from_env(self, monkeypatch):
        monkeypatch.setenv("YIZHAN_TURN_DELAY", "0.25")
        assert GameConfig().turn_delay == 0.25

    def test_debug_from_env(self, monkeypatch):
        monkeypatch.setenv("YIZHAN_DEBUG", "yes")
        assert GameConfig().debug_mode is True

    def test_log_file_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("YIZHAN_LOG_FILE", str(tmp_path / "a.log"))
        assert GameConfig().log_file == str(tmp_path / "a.log")

    def test_get_config_is_singleton(self):
        assert get_config() is get_config()

    def test_reset_config(self, monkeypatch):
        first = get_config()
        reset_config()
        assert get_config() is not first


class TestConfigValidation:
    def test_default_config_valid(self, monkeypatch):
        monkeypatch.delenv("YIZHAN_LANG", raising=False)
        monkeypatch.delenv("YIZHAN_TURN_DELAY", raising=False)
        errors = GameConfig().validate()
        assert errors == [], f"Default config errors: {errors}"

    def test_invalid_max_turns(self):
        errors = GameConfig(max_turns=0).validate()
        assert any("max_turns" in e for e in errors)

    def test_negative_delay(self):
        errors = GameConfig(turn_delay=-1).validate()
        assert any("turn_delay" in e for e in errors)

    def test_unknown_locale(self):
        errors = GameConfig(locale="ja_JP").validate()
        assert any("locale" in e for e in errors)

    def test_negative_hand_size(self):
        errors = GameConfig(initial_hand_size=-1, draw_per_turn=-2).validate()
        assert len(errors) == 2
