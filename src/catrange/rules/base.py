# src/catrange/rules/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from catrange.scout.types import ColumnProfile

if TYPE_CHECKING:
    from catrange.api.results import ConstraintSuggestion


class ConstraintRule(ABC):
    """
    Capability set shared by all suggestion rules.

    A rule inspects a precomputed ColumnProfile, decides whether it applies,
    and if so builds a ConstraintSuggestion. Rules are stateless apart from
    construction-time configuration, so one instance may serve many columns
    concurrently.
    """

    rule_description: str = ""

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return str(self)

    @abstractmethod
    def should_be_applied(self, profile: ColumnProfile, num_records: int) -> bool:
        """Whether this rule has a suggestion for the profiled column."""
        ...

    @abstractmethod
    def candidate(self, profile: ColumnProfile, num_records: int) -> "ConstraintSuggestion":
        """Build the suggestion. Only valid when should_be_applied() is True."""
        ...
