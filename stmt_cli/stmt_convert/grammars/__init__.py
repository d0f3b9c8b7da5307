"""Bank grammar selection and the statement parsing entry point."""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Mapping, Sequence
from enum import Enum
from types import MappingProxyType

from stmt_cli.shared.exceptions import UnsupportedFormatError

from ..summary import summarize
from ..types import ParseResult, Transaction
from ..utils import split_lines
from . import kbank, scb

_LOGGER = logging.getLogger(__name__)


class BankFormat(str, Enum):
    """Supported statement layouts."""

    SCB = "scb"
    KBANK = "kbank"


DEFAULT_BANK_FORMAT = BankFormat.SCB

FRIENDLY_NAMES: Mapping[BankFormat, str] = MappingProxyType(
    {
        BankFormat.SCB: "Siam Commercial Bank (SCB)",
        BankFormat.KBANK: "Kasikornbank (KBANK)",
    }
)

LineParser = Callable[[Sequence[str]], list[Transaction]]

_PARSERS: Mapping[BankFormat, LineParser] = MappingProxyType(
    {
        BankFormat.SCB: scb.parse_lines,
        BankFormat.KBANK: kbank.parse_lines,
    }
)

__all__ = (
    "BankFormat",
    "DEFAULT_BANK_FORMAT",
    "FRIENDLY_NAMES",
    "parse_statement",
    "resolve_bank_format",
)


def resolve_bank_format(tag: BankFormat | str | None, *, strict: bool = False) -> BankFormat:
    """Map a caller-supplied bank tag onto a ``BankFormat``.

    Unknown or missing tags fall back to SCB, which is what existing callers
    rely on. Pass ``strict=True`` to reject unknown tags instead.
    """

    if isinstance(tag, BankFormat):
        return tag
    if tag is None:
        return DEFAULT_BANK_FORMAT

    normalized = str(tag).strip().lower()
    for bank_format in BankFormat:
        if bank_format.value == normalized:
            return bank_format

    if strict:
        supported = ", ".join(member.value for member in BankFormat)
        raise UnsupportedFormatError(
            f"Unsupported bank type '{tag}'. Supported bank types: {supported}"
        )
    _LOGGER.warning(
        "Unknown bank type %r; falling back to %s", tag, FRIENDLY_NAMES[DEFAULT_BANK_FORMAT]
    )
    return DEFAULT_BANK_FORMAT


def parse_statement(
    text: str,
    bank_type: BankFormat | str | None = DEFAULT_BANK_FORMAT,
    *,
    debit_codes: Collection[str] | None = None,
) -> ParseResult:
    """Parse extracted statement text into transactions plus summary totals.

    ``text`` is the text of every page joined with newlines in page order.
    Lines that do not look like transactions are skipped, so an empty or
    unrelated document yields a zero-transaction result rather than an error.
    ``debit_codes`` adds SCB transaction codes that should be treated as money
    out on top of the built-in table.
    """

    bank_format = resolve_bank_format(bank_type)
    lines = split_lines(text)

    if bank_format is BankFormat.SCB and debit_codes:
        transactions = scb.parse_lines(lines, debit_codes=scb.DEBIT_CODES | set(debit_codes))
    else:
        transactions = _PARSERS[bank_format](lines)

    _LOGGER.debug(
        "Parsed %d transactions from %d lines using %s",
        len(transactions),
        len(lines),
        FRIENDLY_NAMES[bank_format],
    )
    return summarize(transactions)
