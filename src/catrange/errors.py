# src/catrange/errors.py
from __future__ import annotations

from dataclasses import dataclass


class CatrangeError(Exception):
    """Base exception for rule, profile, and settings failures."""


class ConfigError(CatrangeError, ValueError):
    """Raised when rule settings are missing or invalid."""


@dataclass(eq=False)
class InapplicableProfileError(CatrangeError, ValueError):
    """Raised when a rule is asked for a suggestion it cannot make."""

    column: str
    reason: str

    def __str__(self) -> str:
        return f"cannot suggest a constraint for column '{self.column}': {self.reason}"
