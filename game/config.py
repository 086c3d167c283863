"""游戏配置中心 (SSOT - 单一事实来源)

所有可配置的游戏参数应在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_optional_int(key: str) -> int | None:
    """从环境变量获取可选整数配置，未设置或无效时为 None"""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """游戏配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - YIZHAN_TURN_DELAY: 回合间隔秒数（仅展示层使用）
    - YIZHAN_SEED: 随机种子，设置后对局可复现
    - YIZHAN_LANG: 界面语言
    - YIZHAN_LOG_LEVEL: 日志级别
    - YIZHAN_LOG_FILE: 日志文件路径（相对路径以当前目录为基准）
    - YIZHAN_DEBUG: 调试模式
    """
    # ==================== 对局规则 ====================
    max_turns: int = 10
    initial_hand_size: int = 5
    draw_per_turn: int = 1
    max_health: int = 100

    # ==================== 展示节奏 ====================
    turn_delay: float = field(
        default_factory=lambda: _get_env_float("YIZHAN_TURN_DELAY", 1.5)
    )

    # ==================== 随机性 ====================
    seed: int | None = field(
        default_factory=lambda: _get_env_optional_int("YIZHAN_SEED")
    )

    # ==================== 本地化 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("YIZHAN_LANG", "zh_CN")
    )

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("YIZHAN_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: os.environ.get("YIZHAN_LOG_FILE", "logs/yizhan.log")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("YIZHAN_DEBUG", False)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """从环境变量创建配置实例"""
        return cls()

    def validate(self) -> list[str]:
        """校验配置，返回错误描述列表（为空表示合法）"""
        errors = []
        if self.max_turns < 1:
            errors.append(f"max_turns must be >= 1, got {self.max_turns}")
        if self.initial_hand_size < 0:
            errors.append(f"initial_hand_size must be >= 0, got {self.initial_hand_size}")
        if self.draw_per_turn < 0:
            errors.append(f"draw_per_turn must be >= 0, got {self.draw_per_turn}")
        if self.max_health < 1:
            errors.append(f"max_health must be >= 1, got {self.max_health}")
        if self.turn_delay < 0:
            errors.append(f"turn_delay must be >= 0, got {self.turn_delay}")
        if self.locale not in ("zh_CN", "en_US"):
            errors.append(f"locale must be zh_CN or en_US, got {self.locale!r}")
        return errors

    def get(self, key: str, default: object | None = None) -> object:
        """字典风格的访问方法"""
        return getattr(self, key, default)


# 全局配置单例
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
