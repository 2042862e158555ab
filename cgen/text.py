"""Tokenising strings on sets of delimiter characters."""

from __future__ import annotations

import re

ASCII_SPACES = "\t\n\v\f\r "


def tokens(line: str, delims: str = ASCII_SPACES) -> list[str]:
    """Split ``line`` on any character of ``delims``, dropping empty tokens."""
    if not delims:
        return [line] if line else []
    pattern = "[" + "".join(re.escape(c) for c in delims) + "]+"
    return [tok for tok in re.split(pattern, line) if tok]


def split(line: str) -> list[str]:
    """Split ``line`` on ASCII whitespace."""
    return tokens(line, ASCII_SPACES)