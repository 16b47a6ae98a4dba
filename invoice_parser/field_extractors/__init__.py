"""Field extraction rules for structured invoice data."""
from .date import extract_date
from .invoice_number import extract_invoice_number
from .total import extract_total
from .vendor import extract_vendor

__all__ = ["extract_date", "extract_invoice_number", "extract_total", "extract_vendor"]
