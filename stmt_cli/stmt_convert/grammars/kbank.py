"""Kasikornbank (KBANK) statement grammar.

KBANK statements put each transaction on a single tab-delimited line::

    01-03-24 10:35 K PLUS<TAB>2,186.43 โอนไป BBL น.ส. จิราพร<TAB>โอนเงิน 309.00
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..names import extract_name
from ..types import Transaction
from ..utils import parse_amount

TRANSACTION_LINE_RE = re.compile(
    r"^(?P<day>\d{2})-(?P<month>\d{2})-(?P<year>\d{2})\s+(?P<time>\d{2}:\d{2})\s+"
    r"(?P<channel>[^\t]+?)\t(?P<balance>\d[\d,]*\.\d{2})(?: +(?P<description>[^\t]*?))? *\t"
    r"(?P<type>[^\t]+?)\s+(?P<amount>\d[\d,]*\.\d{2})$"
)

BROUGHT_FORWARD_MARKER = "ยอดยกมา"

INBOUND_TRANSFER_PREFIX = "รับโอนเงิน"
CREDIT_TYPES: frozenset[str] = frozenset({"ฝากเงิน", "ดอกเบี้ย"})


def is_credit_type(txn_type: str) -> bool:
    """Return True when the transaction type text denotes money coming in."""

    cleaned = txn_type.strip()
    return cleaned.startswith(INBOUND_TRANSFER_PREFIX) or cleaned in CREDIT_TYPES


def parse_lines(lines: Sequence[str]) -> list[Transaction]:
    """Parse trimmed statement lines into transactions in source order."""

    transactions: list[Transaction] = []
    for line in lines:
        if BROUGHT_FORWARD_MARKER in line:
            continue
        match = TRANSACTION_LINE_RE.match(line)
        if not match:
            continue
        transactions.append(_build_transaction(match))
    return transactions


def _build_transaction(match: re.Match[str]) -> Transaction:
    txn_type = match.group("type").strip()
    amount = parse_amount(match.group("amount"))
    description_clean = (match.group("description") or "").strip()

    return Transaction(
        date=f"{match.group('day')}/{match.group('month')}/{match.group('year')}",
        time=match.group("time"),
        code=txn_type,
        debit_credit=amount if is_credit_type(txn_type) else -amount,
        balance=parse_amount(match.group("balance")),
        description_note=f"{description_clean} | {txn_type}",
        description_clean=description_clean,
        name=extract_name(description_clean),
        note="",
    )
