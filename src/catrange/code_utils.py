# src/catrange/code_utils.py
"""
Escaping for string literals embedded in generated Python code hints.

Unlike SQL literals, these are double-quoted and backslash-escaped, so a
generated snippet parses back to the original strings.
"""

from __future__ import annotations

from typing import Dict, Iterable

_SIMPLE_ESCAPES: Dict[int, str] = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
}


def _build_table() -> Dict[int, str]:
    table = dict(_SIMPLE_ESCAPES)
    # Remaining C0 controls and DEL
    for code in list(range(0x20)) + [0x7F]:
        table.setdefault(code, f"\\x{code:02x}")
    # Lone surrogates can't be written to UTF-8 source
    for code in range(0xD800, 0xE000):
        table[code] = f"\\u{code:04x}"
    return table


_ESCAPE_TABLE = _build_table()


def escape_str(value: str) -> str:
    """Escape the body of a double-quoted string literal."""
    return value.translate(_ESCAPE_TABLE)


def lit_str(value: str) -> str:
    """Double-quoted string literal for generated code."""
    return '"' + escape_str(value) + '"'


def list_literal(values: Iterable[str]) -> str:
    """Comma-separated string literals, as used inside [...]."""
    return ", ".join(lit_str(v) for v in values)
