from __future__ import annotations
import logging
import os
from typing import Optional

DEFAULT_PROMPT = "{n} => "
DEFAULT_LOG_LEVEL = logging.WARNING

_FALSE_WORDS = {"0", "false", "no", "off"}


def get_prompt_template() -> str:
    # `{n}` is replaced with the input line counter
    return os.environ.get("LANG1_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("LANG1_LOG_LEVEL")
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def use_color() -> bool:
    raw = os.environ.get("LANG1_COLOR")
    if raw is not None:
        return raw.strip().lower() not in _FALSE_WORDS
    return "NO_COLOR" not in os.environ


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("LANG1_RECURSION_LIMIT")
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
