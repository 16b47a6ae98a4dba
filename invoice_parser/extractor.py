"""Turn raw document text into an :class:`ExtractedInvoice` record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .field_extractors import extract_date, extract_invoice_number, extract_total, extract_vendor


@dataclass(frozen=True)
class ExtractedInvoice:
    """Best-guess invoice fields; ``None`` means the rule found nothing."""

    invoice_number: Optional[str] = None
    date: Optional[str] = None
    vendor: Optional[str] = None
    total: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "invoiceNumber": self.invoice_number,
            "date": self.date,
            "vendor": self.vendor,
            "total": self.total,
        }


def extract_invoice_data(text: str) -> ExtractedInvoice:
    """Apply the four field rules to ``text``.

    The rules are independent and never raise; a field that does not match is
    left as ``None`` instead of failing the whole record.
    """

    text = text or ""
    return ExtractedInvoice(
        invoice_number=extract_invoice_number(text),
        date=extract_date(text),
        vendor=extract_vendor(text),
        total=extract_total(text),
    )


__all__ = ["ExtractedInvoice", "extract_invoice_data"]
