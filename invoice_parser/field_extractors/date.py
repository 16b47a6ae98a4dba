"""Date extraction helpers."""
from __future__ import annotations

import re
from typing import Optional

from .patterns import SPACE

NUMERIC_DATE = r"\d{1,2}[-/]\d{1,2}[-/]\d{2,4}"
WORDED_DATE = r"\w+" + SPACE + r"\d{1,2}," + SPACE + r"\d{4}"

DATE_PATTERN = re.compile(
    rf"(?:date|invoice{SPACE}date){SPACE}*[:\-]?{SPACE}*({NUMERIC_DATE}|{WORDED_DATE})",
    re.IGNORECASE | re.ASCII,
)


def extract_date(text: str) -> Optional[str]:
    """Return the first labelled date in ``text`` exactly as written.

    Both ``03/14/2024`` and ``March 5, 2023`` styles are accepted. The value is
    never parsed into a calendar date, so day/month order is left to the reader.
    """

    match = DATE_PATTERN.search(text)
    if not match:
        return None
    return match.group(1)


__all__ = ["DATE_PATTERN", "extract_date"]
