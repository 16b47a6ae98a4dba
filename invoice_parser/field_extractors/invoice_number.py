"""Invoice number extraction."""
from __future__ import annotations

import re
from typing import Optional

from .patterns import SPACE

# IGNORECASE also lets the capture class accept lowercase letters.
INVOICE_NUMBER_PATTERN = re.compile(
    rf"(?:invoice{SPACE}?#|invoice{SPACE}?no|inv{SPACE}?#|invoice{SPACE}number)"
    rf"{SPACE}*[:\-]?{SPACE}*([A-Z0-9\-]+)",
    re.IGNORECASE | re.ASCII,
)


def extract_invoice_number(text: str) -> Optional[str]:
    match = INVOICE_NUMBER_PATTERN.search(text)
    if not match:
        return None
    return match.group(1)


__all__ = ["INVOICE_NUMBER_PATTERN", "extract_invoice_number"]
