"""Siam Commercial Bank (SCB) statement grammar.

SCB statements print one transaction per line::

    01/03/24 09:15 X1 MOB 1,500.00 10,000.00 DESC : นาย สมชาย ใจดี

optionally followed by a ``NOTE : ...`` line that belongs to the same
transaction.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping, Sequence
from types import MappingProxyType

from ..names import extract_name
from ..types import Transaction
from ..utils import parse_amount

TRANSACTION_LINE_RE = re.compile(
    r"^(?P<date>\d{2}/\d{2}/\d{2})\s+(?P<time>\d{2}:\d{2})\s+(?P<code>[A-Z0-9]+)\s+"
    r"(?P<channel>[A-Z]+)\s+(?P<amount>\d[\d,]*\.\d{2})\s+(?P<balance>\d[\d,]*\.\d{2})\s+"
    r"DESC\s*:\s*(?P<description>.+)"
)

NOTE_LINE_RE = re.compile(r"^NOTE\s*:\s*(?P<note>.+)")

# Codes that always move money out of the account.
DEBIT_CODES: frozenset[str] = frozenset({"X2", "CO"})

CODE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "X1": "receive transfer",
        "X2": "transfer out",
    }
)

_NO_NOTE = "-"


def parse_lines(
    lines: Sequence[str],
    *,
    debit_codes: Collection[str] = DEBIT_CODES,
    code_labels: Mapping[str, str] = CODE_LABELS,
) -> list[Transaction]:
    """Parse trimmed statement lines into transactions in source order."""

    transactions: list[Transaction] = []
    index = 0
    while index < len(lines):
        match = TRANSACTION_LINE_RE.match(lines[index])
        index += 1
        if not match:
            continue

        note = _NO_NOTE
        if index < len(lines):
            note_match = NOTE_LINE_RE.match(lines[index])
            if note_match:
                note = note_match.group("note").strip()
                index += 1

        transactions.append(
            _build_transaction(match, note, debit_codes=debit_codes, code_labels=code_labels)
        )
    return transactions


def _build_transaction(
    match: re.Match[str],
    note: str,
    *,
    debit_codes: Collection[str],
    code_labels: Mapping[str, str],
) -> Transaction:
    code = match.group("code")
    amount = parse_amount(match.group("amount"))
    debit_credit = -amount if code in debit_codes else amount

    description_clean = match.group("description").strip()
    if note != _NO_NOTE:
        description_note = f"{description_clean} | {note}"
    else:
        description_note = description_clean

    return Transaction(
        date=match.group("date"),
        time=match.group("time"),
        code=code_labels.get(code, code),
        debit_credit=debit_credit,
        balance=parse_amount(match.group("balance")),
        description_note=description_note,
        description_clean=description_clean,
        name=extract_name(description_clean),
        note="" if note == _NO_NOTE else note,
    )
