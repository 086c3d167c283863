"""
日志配置测试
处理器安装、级别过滤、幂等与摘除
"""

import logging

import pytest

from game.config import GameConfig
from logging_config import (
    CONSOLE_HANDLER, FILE_HANDLER, level_of, log_path_for, setup_logging, teardown_logging,
)


@pytest.fixture(autouse=True)
def _clean_handlers():
    yield
    teardown_logging()


def ours(root):
    return [h for h in root.handlers if h.name in (FILE_HANDLER, CONSOLE_HANDLER)]


def make_config(tmp_path, **kwargs):
    kwargs.setdefault("log_level", "INFO")
    kwargs.setdefault("debug_mode", False)
    return GameConfig(log_file=str(tmp_path / "logs" / "yizhan.log"), **kwargs)


class TestLevelOf:
    def test_names(self):
        assert level_of("debug") == logging.DEBUG
        assert level_of(" WARNING ") == logging.WARNING

    def test_unknown_defaults_to_info(self):
        assert level_of("chatty") == logging.INFO
        assert level_of("") == logging.INFO


class TestLogPath:
    def test_relative_made_absolute(self):
        path = log_path_for(GameConfig(log_file="logs/a.log"))
        assert path.is_absolute()
        assert path.name == "a.log"

    def test_absolute_kept(self, tmp_path):
        assert log_path_for(GameConfig(log_file=str(tmp_path / "b.log"))) == tmp_path / "b.log"


class TestSetupLogging:
    def test_file_written_as_utf8(self, tmp_path):
        config = make_config(tmp_path, log_level="DEBUG")
        root = setup_logging(config)
        logging.getLogger("game.engine").debug("第 1 回合")
        for handler in ours(root):
            handler.flush()
        assert "第 1 回合" in log_path_for(config).read_text(encoding="utf-8")

    def test_file_level_follows_config(self, tmp_path):
        root = setup_logging(make_config(tmp_path, log_level="ERROR"))
        handler = next(h for h in root.handlers if h.name == FILE_HANDLER)
        assert handler.level == logging.ERROR

    def test_console_only_in_debug_mode(self, tmp_path):
        root = setup_logging(make_config(tmp_path))
        assert [h.name for h in ours(root)] == [FILE_HANDLER]
        setup_logging(make_config(tmp_path, debug_mode=True))
        console = next(h for h in root.handlers if h.name == CONSOLE_HANDLER)
        assert console.level == logging.WARNING

    def test_idempotent(self, tmp_path):
        config = make_config(tmp_path, debug_mode=True)
        root = setup_logging(config)
        setup_logging(config)
        assert len(ours(root)) == 2

    def test_repeat_call_updates_level(self, tmp_path):
        root = setup_logging(make_config(tmp_path, log_level="INFO"))
        setup_logging(make_config(tmp_path, log_level="DEBUG"))
        handler = next(h for h in root.handlers if h.name == FILE_HANDLER)
        assert handler.level == logging.DEBUG

    def test_teardown_removes_handlers(self, tmp_path):
        root = setup_logging(make_config(tmp_path, debug_mode=True))
        teardown_logging()
        assert ours(root) == []
