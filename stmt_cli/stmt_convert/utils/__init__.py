"""Shared utilities for statement grammars."""

from __future__ import annotations

from .amounts import parse_amount, split_lines

__all__ = [
    "parse_amount",
    "split_lines",
]
