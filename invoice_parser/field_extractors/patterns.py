"""Shared regex building blocks for the field rules."""
from __future__ import annotations

import re

# Whitespace and line terminators as recognised by ECMAScript ``\s`` and
# ``String.prototype.trim``: unlike Python's ``str.isspace`` this includes
# U+FEFF and excludes the U+001C-U+001F separators.
WHITESPACE_CHARS = "".join(
    chr(code)
    for code in [0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680, *range(0x2000, 0x200B),
                 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]
)

# Patterns are compiled with re.ASCII so \d and \w stay ASCII; SPACE replaces \s.
SPACE = "[" + re.escape(WHITESPACE_CHARS) + "]"


def trim(text: str) -> str:
    return text.strip(WHITESPACE_CHARS)


__all__ = ["SPACE", "WHITESPACE_CHARS", "trim"]
