"""Reduce a transaction list into summary totals."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .types import ParseResult, Transaction

_ZERO = Decimal("0")


def summarize(transactions: Iterable[Transaction]) -> ParseResult:
    """Build a ``ParseResult`` with credit/debit totals, count and final balance."""

    ordered = tuple(transactions)
    total_credit = sum((t.debit_credit for t in ordered if t.debit_credit > 0), _ZERO)
    total_debit = sum((t.debit_credit for t in ordered if t.debit_credit < 0), _ZERO)
    final_balance = ordered[-1].balance if ordered else _ZERO
    return ParseResult(
        transactions=ordered,
        total_credit=total_credit,
        total_debit=total_debit,
        total_transactions=len(ordered),
        final_balance=final_balance,
    )
