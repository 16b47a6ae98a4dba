"""Vendor extraction from the document header."""
from __future__ import annotations

from typing import Optional

from .patterns import trim


def extract_vendor(text: str) -> Optional[str]:
    """Return the first non-blank line of ``text``, trimmed.

    Invoices usually print the issuer name first, so this is purely
    positional: no scoring and no verification of the chosen line. Trimming
    removes a leading byte-order mark but keeps ASCII control separators.
    """

    for line in text.split("\n"):
        stripped = trim(line)
        if stripped:
            return stripped
    return None


__all__ = ["extract_vendor"]
