from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from stmt_cli.shared import paths
from stmt_cli.stmt_convert.main import NO_TRANSACTIONS_MESSAGE, main
from stmt_cli.stmt_convert.parsers.pdf_loader import StatementDocument

SCB_TEXT = "\n".join(
    [
        "01/03/24 09:15 X1 MOB 1,500.00 10,000.00 DESC: นาย สมชาย ใจดี",
        "NOTE: ค่าเช่า",
        "02/03/24 10:00 X2 ENET 250.50 9,749.50 DESC : ค่าอาหาร",
    ]
)

KBANK_TEXT = "01-03-24 10:35 K PLUS\t2,186.43 โอนไป BBL น.ส. จิราพร\tโอนเงิน 309.00"


def _strip_ansi(value: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", value)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.CONFIG_DIR_ENV, str(tmp_path / "config"))
    monkeypatch.delenv(paths.CONFIG_FILE_ENV, raising=False)
    for env_key in (
        "STMTCLI_DEFAULT_BANK",
        "STMTCLI_OUTPUT_FORMAT",
        "STMTCLI_OUTPUT_DIR",
        "STMTCLI_MAX_FILE_SIZE_MB",
        "STMTCLI_SCB_DEBIT_CODES",
    ):
        monkeypatch.delenv(env_key, raising=False)


def _write_text(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_dry_run(tmp_path: Path) -> None:
    source = _write_text(tmp_path, "scb.txt", SCB_TEXT)

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "--text", "--dry-run"])

    assert result.exit_code == 0, result.output
    output = _strip_ansi(result.output)
    assert "Dry run summary" in output
    assert re.search(r"Transactions\s+2\b", output)
    assert re.search(r"Total debit\s+-250\.50", output)
    assert re.search(r"Final balance\s+9,749\.50", output)


def test_cli_defaults_output_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    source = _write_text(tmp_path, "march.txt", SCB_TEXT)
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "--text"])

    assert result.exit_code == 0, result.output
    expected_output = tmp_path / "output" / "march.csv"
    assert expected_output.exists()
    assert "receive transfer" in expected_output.read_text(encoding="utf-8")


def test_cli_kbank_json_to_stdout(tmp_path: Path) -> None:
    source = _write_text(tmp_path, "kbank.txt", KBANK_TEXT)

    runner = CliRunner()
    result = runner.invoke(
        main, [str(source), "--text", "--bank", "kbank", "--format", "json", "--stdout"]
    )

    assert result.exit_code == 0, result.output
    json_start = result.output.index("{")
    json_end = result.output.rindex("}") + 1
    payload = json.loads(result.output[json_start:json_end])
    assert payload["total_debit"] == "-309.00"
    assert payload["transactions"][0]["date"] == "01/03/24"


def test_cli_reads_pdf_through_loader(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    pdf_path = tmp_path / "statement.pdf"
    pdf_path.write_text("fake", encoding="utf-8")
    output_path = tmp_path / "ledger.csv"

    monkeypatch.setattr(
        "stmt_cli.stmt_convert.main.load_statement_pdf",
        lambda *args, **kwargs: StatementDocument(pages=[SCB_TEXT]),
    )

    runner = CliRunner()
    result = runner.invoke(main, [str(pdf_path), "--output", str(output_path)])

    assert result.exit_code == 0, result.output
    assert "ค่าอาหาร" in output_path.read_text(encoding="utf-8")


def test_cli_reports_empty_statement(tmp_path: Path) -> None:
    source = _write_text(tmp_path, "empty.txt", "no transactions here")

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "--text"])

    assert result.exit_code != 0
    assert NO_TRANSACTIONS_MESSAGE in result.output


def test_cli_rejects_output_and_stdout_together(tmp_path: Path) -> None:
    source = _write_text(tmp_path, "scb.txt", SCB_TEXT)

    runner = CliRunner()
    result = runner.invoke(
        main, [str(source), "--text", "--stdout", "--output", str(tmp_path / "x.csv")]
    )

    assert result.exit_code != 0
    assert "Cannot use both --output and --stdout" in result.output


def test_cli_rejects_unknown_bank(tmp_path: Path) -> None:
    source = _write_text(tmp_path, "scb.txt", SCB_TEXT)

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "--text", "--bank", "ktb"])

    assert result.exit_code != 0
    assert "ktb" in result.output


def test_cli_missing_file_is_reported(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(tmp_path / "missing.pdf")])

    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_cli_uses_configured_debit_codes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    source = _write_text(tmp_path, "fees.txt", "05/03/24 08:00 X9 BR 75.00 925.00 DESC : fee")
    monkeypatch.setenv("STMTCLI_SCB_DEBIT_CODES", "x9")

    runner = CliRunner()
    result = runner.invoke(main, [str(source), "--text", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert re.search(r"Total debit\s+-75\.00", _strip_ansi(result.output))
