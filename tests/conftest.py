from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def sample_invoice_text() -> str:
    return "\n".join(
        [
            "",
            "   ",
            "Acme Corp",
            "123 Industrial Way, Springfield",
            "Invoice #: AB-1234",
            "Invoice Date: 03/14/2024",
            "Widgets x 3        $30.00",
            "Gadgets x 1        $12.50",
            "Amount Due: $42.50",
        ]
    )
