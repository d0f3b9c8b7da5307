"""Rich-based logging helpers for the statement CLI."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install

install(show_locals=False)

_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "debug": "dim",
    }
)

# Converted payloads go to stdout through click; all chatter goes to stderr.
# Highlighting is off so Thai names and amounts are printed without injected ANSI codes.
_stderr_console = Console(stderr=True, theme=_THEME, highlight=False)


@dataclass(slots=True)
class Logger:
    """Lightweight logger facade backed by a Rich stderr console."""

    verbose: bool = False

    def info(self, message: str) -> None:
        _stderr_console.print(message, style="info", markup=False)

    def success(self, message: str) -> None:
        _stderr_console.print(message, style="success", markup=False)

    def warning(self, message: str) -> None:
        _stderr_console.print(message, style="warning", markup=False)

    def error(self, message: str) -> None:
        _stderr_console.print(message, style="error", markup=False)

    def debug(self, message: str) -> None:
        if self.verbose:
            _stderr_console.print(message, style="debug", markup=False)

    def summary(self, title: str, rows: Iterable[tuple[str, str]]) -> None:
        """Print label/value pairs as a two-column table on stderr."""
        table = Table(title=title, box=box.SIMPLE, show_header=False, title_justify="left")
        table.add_column("Field", style="bold", no_wrap=True)
        table.add_column("Value", justify="right", no_wrap=True)
        for label, value in rows:
            table.add_row(label, value)
        _stderr_console.print(table)


def get_logger(verbose: bool = False) -> Logger:
    """Return a configured Logger instance."""
    return Logger(verbose=verbose)
