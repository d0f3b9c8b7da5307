"""Dataclasses describing parsed statement data."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    """One ledger row recovered from statement text."""

    date: str  # DD/MM/YY
    time: str  # HH:MM
    code: str
    debit_credit: Decimal  # positive = money in, negative = money out
    balance: Decimal
    description_note: str
    description_clean: str
    name: str
    note: str = ""


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Parsed transactions in source order plus summary totals."""

    transactions: tuple[Transaction, ...]
    total_credit: Decimal
    total_debit: Decimal
    total_transactions: int
    final_balance: Decimal

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self.transactions)
