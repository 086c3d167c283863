"""轻量级 i18n 框架 — 零外部依赖。

用法::

    from i18n import t, set_locale

    set_locale("en_US")
    print(t("log.turn_start", turn=3))

    # 便捷别名
    from i18n import _
    print(_("game.over_win"))

    # 领域助手
    from i18n import role_name, school_name, result_name
    print(school_name("golden_needle"))   # → "金针派" / "Golden Needle"
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES = ("zh_CN", "en_US")
DEFAULT_LOCALE = "zh_CN"

_locale: str = DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需加载翻译表（延迟导入，避免循环）。"""
    if locale == "zh_CN":
        from .zh_CN import STRINGS
    elif locale == "en_US":
        from .en_US import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def _table(locale: str) -> dict[str, str]:
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    return _tables[locale]


def set_locale(locale: str) -> None:
    """设置当前语言。

    Raises:
        ValueError: 不支持的语言
    """
    global _locale
    # 预加载以确保 locale 有效
    _table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return list(SUPPORTED_LOCALES)


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 zh_CN，仍缺失则返回 ``[key]``。

    Args:
        key: 翻译键，如 ``"log.turn_start"``。
        **kwargs: 格式化参数，如 ``turn=3``。
    """
    template = _table(_locale).get(key)

    # 回退到 zh_CN
    if template is None and _locale != DEFAULT_LOCALE:
        template = _table(DEFAULT_LOCALE).get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using zh_CN", key, _locale)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── 便捷别名 ──
_ = t


# ── 领域助手函数 ──


def _lookup(prefix: str, value: str) -> str:
    key = f"{prefix}.{value}"
    result = t(key)
    return value if result == f"[{key}]" else result


def role_name(value: str) -> str:
    """获取角色的国际化显示名，如 ``"doctor"``。"""
    return _lookup("role", value)


def school_name(value: str) -> str:
    """获取流派的国际化显示名，如 ``"warm_disease"``。"""
    return _lookup("school", value)


def result_name(value: str) -> str:
    """获取对局结果的国际化显示名，如 ``"win"``。"""
    return _lookup("result", value)
