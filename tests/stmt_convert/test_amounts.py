from __future__ import annotations

from decimal import Decimal

import pytest

from stmt_cli.stmt_convert.utils import parse_amount, split_lines


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10,000.00", Decimal("10000.00")),
        ("1,234,567.89", Decimal("1234567.89")),
        ("0.01", Decimal("0.01")),
        (" 309.00 ", Decimal("309.00")),
    ],
)
def test_parse_amount(raw: str, expected: Decimal) -> None:
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", ",", "abc", "-5.00", "1.2.3", "NaN", "Infinity"])
def test_parse_amount_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_split_lines_trims_and_keeps_order() -> None:
    assert split_lines("  a \r\n\tb\t\n\nc") == ["a", "b", "", "c"]
    assert split_lines("") == []
