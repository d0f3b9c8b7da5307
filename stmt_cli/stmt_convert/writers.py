"""CSV and JSON rendering for parsed statements."""

from __future__ import annotations

import csv
import json
from decimal import Decimal
from pathlib import Path
from typing import IO

from .types import ParseResult, Transaction

# Column layout of the ledger export consumed by accounting staff.
CSV_HEADER: tuple[str, ...] = (
    "Date",
    "Time",
    "Code",
    "Debit/Credit",
    "Balance/Baht",
    "Description/Note",
    "Description_Clean",
    "Name",
    "Note",
)

FILE_EXTENSIONS = {"csv": "csv", "json": "json"}


def render_result(result: ParseResult, *, output_format: str, stream: IO[str]) -> None:
    """Render a parse result to ``stream`` in the requested format."""
    fmt = (output_format or "csv").lower()
    if fmt == "csv":
        _render_csv(result, stream=stream)
    elif fmt == "json":
        _render_json(result, stream=stream)
    else:  # pragma: no cover - Click validation should prevent this
        raise ValueError(f"Unsupported output format '{output_format}'.")


def write_result(result: ParseResult, *, output_format: str, path: str | Path) -> Path:
    """Write a parse result to ``path``, creating parent directories."""
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("w", newline="", encoding="utf-8") as handle:
        render_result(result, output_format=output_format, stream=handle)
    return output_file


def _render_csv(result: ParseResult, *, stream: IO[str]) -> None:
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)
    for txn in result.transactions:
        writer.writerow(_csv_row(txn))


def _csv_row(txn: Transaction) -> tuple[str, ...]:
    return (
        txn.date,
        txn.time,
        txn.code,
        _format_amount(txn.debit_credit),
        _format_amount(txn.balance),
        txn.description_note,
        txn.description_clean,
        txn.name,
        txn.note,
    )


def _render_json(result: ParseResult, *, stream: IO[str]) -> None:
    payload = {
        "transactions": [
            {
                "date": txn.date,
                "time": txn.time,
                "code": txn.code,
                "debit_credit": _format_amount(txn.debit_credit),
                "balance": _format_amount(txn.balance),
                "description_note": txn.description_note,
                "description_clean": txn.description_clean,
                "name": txn.name,
                "note": txn.note,
            }
            for txn in result.transactions
        ],
        "total_credit": _format_amount(result.total_credit),
        "total_debit": _format_amount(result.total_debit),
        "total_transactions": result.total_transactions,
        "final_balance": _format_amount(result.final_balance),
    }
    json.dump(payload, stream, indent=2, ensure_ascii=False)
    stream.write("\n")


def _format_amount(value: Decimal) -> str:
    # Fixed-point, two decimal places.
    return f"{value:.2f}"
