"""
日志配置
按 GameConfig 安装根日志处理器：滚动日志文件始终开启，调试模式下另开控制台输出。
对局画面由 rich 绘制，控制台输出只放行 WARNING 及以上，避免打乱画面。
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Optional

from game.config import GameConfig, get_config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FILE_HANDLER = "yizhan.file"
CONSOLE_HANDLER = "yizhan.console"

# 单个文件上限 1 MB，保留 3 份
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 3


def level_of(name: str) -> int:
    """日志级别名转数值，无法识别时按 INFO"""
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def log_path_for(config: GameConfig) -> Path:
    path = Path(config.log_file)
    return path if path.is_absolute() else Path.cwd() / path


def _install(root: logging.Logger, name: str,
             build: Callable[[], logging.Handler]) -> logging.Handler:
    """按名称复用已装上的处理器，重复调用不会叠加输出"""
    for handler in root.handlers:
        if handler.name == name:
            return handler
    handler = build()
    handler.name = name
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    return handler


def _rotating_file(path: Path) -> Callable[[], logging.Handler]:
    def build() -> logging.Handler:
        path.parent.mkdir(parents=True, exist_ok=True)
        # UTF-8，卡牌名与医案都是中文
        return RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES,
                                   backupCount=LOG_BACKUPS, encoding="utf-8")
    return build


def setup_logging(config: Optional[GameConfig] = None) -> logging.Logger:
    """
    配置根日志

    Args:
        config: 游戏配置，缺省取全局配置；使用其中的 log_level、log_file、debug_mode

    Returns:
        根 logger
    """
    config = config or get_config()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    path = log_path_for(config)
    _install(root, FILE_HANDLER, _rotating_file(path)).setLevel(level_of(config.log_level))
    if config.debug_mode:
        _install(root, CONSOLE_HANDLER, logging.StreamHandler).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging initialized | level=%s file=%s console=%s",
                                     config.log_level, path, config.debug_mode)
    return root


def teardown_logging() -> None:
    """摘除并关闭 setup_logging() 装上的处理器"""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.name in (FILE_HANDLER, CONSOLE_HANDLER):
            root.removeHandler(handler)
            handler.close()
