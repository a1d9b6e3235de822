# src/catrange/constraints.py
"""
Constraint objects produced by suggestion rules.

A constraint only describes a check; evaluating it against data is the job
of a downstream execution engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

Assertion = Callable[[float], bool]


def is_one(value: float) -> bool:
    """Success criterion: the condition holds for every row."""
    return value == 1.0


@dataclass(frozen=True)
class ComplianceConstraint:
    """
    Asserts a boolean SQL condition over the fraction of compliant rows.

    Attributes:
        name: Human readable description
        condition: SQL boolean expression evaluated per row
        assertion: Predicate over the compliance fraction (0.0-1.0)
        columns: Columns referenced by the condition
        where: Optional row filter applied before evaluation
    """

    name: str
    condition: str
    assertion: Assertion
    columns: Tuple[str, ...] = ()
    where: Optional[str] = None

    def __repr__(self) -> str:
        return f"ComplianceConstraint({self.name!r})"

    def check(self, compliance: float) -> bool:
        """Apply the assertion to a compliance fraction computed elsewhere."""
        return bool(self.assertion(compliance))

    def to_sql_filter(self) -> str:
        """SQL predicate matching the violating rows."""
        return f"NOT ({self.condition})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "compliance",
            "name": self.name,
            "condition": self.condition,
            "assertion": getattr(self.assertion, "__name__", repr(self.assertion)),
            "columns": list(self.columns),
            "where": self.where,
        }
