# -*- coding: utf-8 -*-
"""
正气/邪气条
固定 20 格的文本进度条，另提供按比例着色的 rich 版本
"""

from rich.text import Text

HP_BAR_WIDTH = 20
HP_FILLED = "█"
HP_EMPTY = "░"


def filled_segments(health: int, max_health: int, width: int = HP_BAR_WIDTH) -> int:
    """计算实心格数：health * width // max_health，结果限制在 0..width"""
    if max_health <= 0:
        return 0
    return max(0, min(width, health * width // max_health))


def render_hp_bar(health: int, max_health: int, width: int = HP_BAR_WIDTH) -> str:
    """
    生成纯文本进度条

    Example:
        >>> render_hp_bar(55, 100)
        '[███████████░░░░░░░░░] 55/100'
    """
    filled = filled_segments(health, max_health, width)
    return f"[{HP_FILLED * filled}{HP_EMPTY * (width - filled)}] {health}/{max_health}"


def hp_style(health: int, max_health: int) -> str:
    """按剩余比例选择颜色"""
    if max_health <= 0:
        return "red"
    ratio = health / max_health
    if ratio > 0.6:
        return "green"
    if ratio > 0.3:
        return "yellow"
    return "red"


def rich_hp_bar(health: int, max_health: int, width: int = HP_BAR_WIDTH) -> Text:
    """生成着色的进度条，纯文本内容与 render_hp_bar 一致"""
    filled = filled_segments(health, max_health, width)
    text = Text("[")
    text.append(HP_FILLED * filled, style=hp_style(health, max_health))
    text.append(HP_EMPTY * (width - filled), style="dim")
    text.append(f"] {health}/{max_health}")
    return text
