"""Rule-based total amount extraction.

The labelled pattern is tried first. When no ``total``/``amount due``/``balance``
label is followed by a number, every two-decimal money token in the text is
collected and the largest one is taken as the grand total. That fallback is a
heuristic: an invoice whose line items exceed the real total will misfire.

Thousands separators are not understood by either pattern. ``Total: $1,234.56``
matches the labelled rule and yields ``"1"`` because the fraction is optional
and the comma ends the capture.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from .patterns import SPACE

LOGGER = logging.getLogger(__name__)

CURRENCY_SYMBOLS = "$€£"

LABELLED_TOTAL_PATTERN = re.compile(
    rf"(?:total|amount{SPACE}?due|balance){SPACE}*[:\-]?{SPACE}*(?:[{re.escape(CURRENCY_SYMBOLS)}]?{SPACE}?)(\d+(?:\.\d{{2}})?)",
    re.IGNORECASE | re.ASCII,
)
MONEY_TOKEN_PATTERN = re.compile(
    rf"[{re.escape(CURRENCY_SYMBOLS)}]?{SPACE}?\d+\.\d{{2}}",
    re.ASCII,
)
_NON_NUMERIC = re.compile(r"[^\d.]", re.ASCII)


@dataclass(frozen=True)
class MoneyToken:
    raw_text: str
    value: Decimal


def _parse_token(raw: str) -> MoneyToken:
    return MoneyToken(raw_text=raw, value=Decimal(_NON_NUMERIC.sub("", raw)))


def find_money_tokens(text: str) -> List[MoneyToken]:
    """Return every non-overlapping ``[symbol] digits.dd`` token in ``text``."""

    return [_parse_token(match.group(0)) for match in MONEY_TOKEN_PATTERN.finditer(text)]


def extract_labelled_total(text: str) -> Optional[str]:
    match = LABELLED_TOTAL_PATTERN.search(text)
    if not match:
        return None
    return match.group(1)


def extract_total(text: str) -> Optional[str]:
    labelled = extract_labelled_total(text)
    if labelled is not None:
        LOGGER.debug("total from label: %s", labelled)
        return labelled

    tokens = find_money_tokens(text)
    if not tokens:
        LOGGER.debug("total not found")
        return None
    best = max(token.value for token in tokens)
    LOGGER.debug("total from largest of %d money tokens: %s", len(tokens), best)
    return f"{best:.2f}"


__all__ = [
    "LABELLED_TOTAL_PATTERN",
    "MONEY_TOKEN_PATTERN",
    "MoneyToken",
    "extract_labelled_total",
    "extract_total",
    "find_money_tokens",
]
