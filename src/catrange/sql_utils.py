# src/catrange/sql_utils.py
"""
SQL escaping for generated constraint conditions.

Conditions target Spark-style SQL: identifiers are backtick-quoted and string
literals are single-quoted with embedded quotes doubled.
"""

from __future__ import annotations

from typing import Iterable


def esc_ident(name: str) -> str:
    """Backtick-quote an identifier, doubling embedded backticks."""
    return "`" + name.replace("`", "``") + "`"


def lit_str(value: str) -> str:
    """Escape a string literal: 'value' with ' doubled."""
    return "'" + value.replace("'", "''") + "'"


def in_list(values: Iterable[str]) -> str:
    """Comma-separated string literals, as used inside IN (...)."""
    return ", ".join(lit_str(v) for v in values)
