"""Helpers for reading statement text with pdfplumber."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pdfplumber

from stmt_cli.shared.exceptions import ExtractionError

_log = logging.getLogger(__name__)


@dataclass(slots=True)
class StatementDocument:
    """Extracted statement text, one entry per page in page order."""

    pages: list[str]

    @property
    def text(self) -> str:
        return "\n".join(self.pages)


def load_statement_pdf(path: str | Path, *, max_size_bytes: int | None = None) -> StatementDocument:
    """Extract per-page text from a statement PDF.

    Args:
        path: Path to PDF file.
        max_size_bytes: Reject files larger than this before opening them.

    Returns:
        StatementDocument with page text.

    Raises:
        ExtractionError: If the file is missing, too large or unreadable.
    """

    pdf_path = _check_source(path, max_size_bytes)

    pages: list[str] = []
    try:
        with pdfplumber.open(pdf_path) as pdf:
            for page in pdf.pages:
                pages.append(page.extract_text() or "")
    except Exception as exc:  # pragma: no cover - pdfplumber raises a wide range of errors
        raise ExtractionError(f"Failed to read PDF with pdfplumber: {exc}") from exc

    _log.debug("Extracted %d pages from %s", len(pages), pdf_path)
    return StatementDocument(pages=pages)


def load_statement_text(path: str | Path, *, max_size_bytes: int | None = None) -> StatementDocument:
    """Load already-extracted statement text; form feeds separate pages."""

    text_path = _check_source(path, max_size_bytes)
    try:
        raw = text_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExtractionError(f"Failed to read text file {text_path}: {exc}") from exc
    return StatementDocument(pages=raw.split("\f"))


def _check_source(path: str | Path, max_size_bytes: int | None) -> Path:
    source = Path(path)
    if not source.is_file():
        raise ExtractionError(f"Statement file does not exist: {source}")
    if max_size_bytes is not None:
        size = source.stat().st_size
        if size > max_size_bytes:
            limit_mb = max_size_bytes / (1024 * 1024)
            raise ExtractionError(
                f"File size exceeds {limit_mb:g}MB limit ({size} bytes): {source}"
            )
    return source
