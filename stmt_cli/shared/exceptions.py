"""Project-wide custom exceptions."""

from __future__ import annotations


class StatementCliError(Exception):
    """Base exception for the statement conversion CLI."""


class ConfigurationError(StatementCliError):
    """Raised when configuration loading or validation fails."""


class ExtractionError(StatementCliError):
    """Raised when reading a statement document fails."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a bank format tag is not supported."""
