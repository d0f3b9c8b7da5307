"""Public exports for the statement converter."""

from .grammars import (
    DEFAULT_BANK_FORMAT,
    FRIENDLY_NAMES,
    BankFormat,
    parse_statement,
    resolve_bank_format,
)
from .names import extract_name
from .summary import summarize
from .types import ParseResult, Transaction

__all__ = [
    "DEFAULT_BANK_FORMAT",
    "FRIENDLY_NAMES",
    "BankFormat",
    "ParseResult",
    "Transaction",
    "extract_name",
    "parse_statement",
    "resolve_bank_format",
    "summarize",
]
