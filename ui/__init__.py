# -*- coding: utf-8 -*-
"""
UI模块
提供终端界面显示
"""

from .ascii_art import ASCIIArt
from .hp_bar import render_hp_bar, rich_hp_bar
from .rich_ui import RichTerminalUI

__all__ = ['ASCIIArt', 'RichTerminalUI', 'render_hp_bar', 'rich_hp_bar']
