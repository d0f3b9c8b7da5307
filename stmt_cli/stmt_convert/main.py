"""stmt-convert CLI entrypoint."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import click

from stmt_cli.shared import paths
from stmt_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors
from stmt_cli.shared.config import OUTPUT_FORMATS

from .grammars import FRIENDLY_NAMES, BankFormat, parse_statement, resolve_bank_format
from .parsers.pdf_loader import StatementDocument, load_statement_pdf, load_statement_text
from .types import ParseResult
from .writers import FILE_EXTENSIONS, render_result, write_result

NO_TRANSACTIONS_MESSAGE = "No transactions found in the PDF. Please check the file format."


def load_document(
    statement_file: str | Path,
    *,
    from_text: bool,
    max_size_bytes: int | None,
) -> StatementDocument:
    """Read statement text from a PDF, or from a pre-extracted text file."""

    if from_text:
        return load_statement_text(statement_file, max_size_bytes=max_size_bytes)
    return load_statement_pdf(statement_file, max_size_bytes=max_size_bytes)


@click.command(help="Convert a bank statement PDF into a transaction ledger.")
@click.argument("statement_file", type=click.Path(path_type=str), required=True)
@click.option(
    "--bank",
    type=click.Choice([member.value for member in BankFormat], case_sensitive=False),
    help="Statement layout (default: from config or 'scb').",
)
@click.option(
    "--text",
    "from_text",
    is_flag=True,
    help="Treat STATEMENT_FILE as already-extracted UTF-8 text instead of a PDF.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    help="Output format (default: from config or 'csv').",
)
@click.option("--output", "output_path", type=click.Path(path_type=str), help="Write output to file.")
@click.option("--stdout", is_flag=True, help="Write output to stdout.")
@common_cli_options
@handle_cli_errors
def main(
    statement_file: str,
    bank: str | None,
    from_text: bool,
    output_format: str | None,
    output_path: str | None,
    stdout: bool,
    cli_ctx: CLIContext,
) -> None:
    settings = cli_ctx.config.conversion
    if output_path and stdout:
        raise click.UsageError("Cannot use both --output and --stdout simultaneously.")

    bank_format = resolve_bank_format(bank or settings.default_bank, strict=True)
    selected_format = (output_format or settings.output_format).lower()
    cli_ctx.logger.info(f"Bank format: {FRIENDLY_NAMES[bank_format]}")

    document = load_document(
        statement_file,
        from_text=from_text,
        max_size_bytes=settings.max_file_size_bytes,
    )
    cli_ctx.logger.debug(f"Loaded {len(document.pages)} page(s) from {statement_file}")

    result = parse_statement(
        document.text,
        bank_format,
        debit_codes=settings.scb_debit_codes,
    )
    if not result.transactions:
        raise click.ClickException(NO_TRANSACTIONS_MESSAGE)

    if cli_ctx.dry_run:
        _emit_dry_run_summary(cli_ctx, bank_format, result)
        return

    _log_totals(cli_ctx, result)

    if stdout:
        buffer = StringIO()
        render_result(result, output_format=selected_format, stream=buffer)
        click.echo(buffer.getvalue().rstrip("\n"))
        cli_ctx.logger.success("Conversion complete. Output sent to stdout.")
        return

    if not output_path:
        auto_output_path = paths.default_output_path(
            statement_file, FILE_EXTENSIONS[selected_format], settings.output_dir
        )
        output_path = str(auto_output_path)
        cli_ctx.logger.info(f"No --output provided; defaulting to {auto_output_path}.")

    written = write_result(result, output_format=selected_format, path=output_path)
    cli_ctx.logger.success(f"Conversion complete. Output written to {written}.")


def _log_totals(cli_ctx: CLIContext, result: ParseResult) -> None:
    cli_ctx.logger.info(
        f"Transactions: {result.total_transactions} | "
        f"Credit: {result.total_credit:,.2f} | "
        f"Debit: {result.total_debit:,.2f} | "
        f"Final balance: {result.final_balance:,.2f}"
    )


def _emit_dry_run_summary(
    cli_ctx: CLIContext,
    bank_format: BankFormat,
    result: ParseResult,
) -> None:
    first, last = result.transactions[0], result.transactions[-1]
    cli_ctx.logger.summary(
        "Dry run summary",
        [
            ("Bank", FRIENDLY_NAMES[bank_format]),
            ("Transactions", str(result.total_transactions)),
            ("Total credit", f"{result.total_credit:,.2f}"),
            ("Total debit", f"{result.total_debit:,.2f}"),
            ("Final balance", f"{result.final_balance:,.2f}"),
            ("Date range", f"{first.date} to {last.date}"),
        ],
    )


if __name__ == "__main__":  # pragma: no cover
    main()
