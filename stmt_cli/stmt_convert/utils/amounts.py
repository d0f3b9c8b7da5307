"""Amount parsing and line splitting helpers."""

from __future__ import annotations

import re
from decimal import Decimal

_PLAIN_AMOUNT_RE = re.compile(r"^\d+(?:\.\d+)?$")


def parse_amount(value: str) -> Decimal:
    """Parse a grouped decimal string such as ``10,000.00`` into a ``Decimal``.

    Only non-negative plain decimals are accepted; the sign of a transaction is
    decided by the grammar, never by the printed amount. Anything else raises
    ``ValueError`` so a malformed figure cannot leak into summary totals.
    """

    cleaned = (value or "").strip().replace(",", "")
    if not _PLAIN_AMOUNT_RE.match(cleaned):
        raise ValueError(f"Invalid amount '{value}'")
    return Decimal(cleaned)


def split_lines(text: str) -> list[str]:
    """Split extracted statement text into trimmed lines, preserving order."""

    if not text:
        return []
    return [line.strip() for line in text.split("\n")]
