# src/catrange/api/results.py
"""
Suggestion result types.

A ConstraintSuggestion is created once per successful rule.candidate() call
and never mutated afterwards. Suggestions aggregates them for export.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml

from catrange.constraints import ComplianceConstraint

if TYPE_CHECKING:
    from catrange.rules.base import ConstraintRule


@dataclass(frozen=True)
class ConstraintSuggestion:
    """
    A proposed constraint plus its human-readable and code representations.

    Attributes:
        constraint: The constraint to adopt
        column: Column the constraint applies to
        current_value: Summary of the metric the rule observed ("Compliance: 1")
        description: Human readable description
        rule: Rule instance that produced this suggestion
        code_hint: Code snippet expressing the constraint for code generation
        sample_values: Values backing the suggestion, in suggested order
    """

    constraint: ComplianceConstraint
    column: str
    current_value: str
    description: str
    rule: "ConstraintRule"
    code_hint: str
    sample_values: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"ConstraintSuggestion({self.column}, {self.rule})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dict; the rule is reported by its description."""
        return {
            "column": self.column,
            "description": self.description,
            "current_value": self.current_value,
            "rule_description": self.rule.rule_description,
            "code_hint": self.code_hint,
            "sample_values": list(self.sample_values),
            "constraint": self.constraint.to_dict(),
        }

    def to_rule(self, severity: str = "blocking", id: Optional[str] = None) -> Dict[str, Any]:
        """
        Export as an inline allowed_values rule dict for a check engine.

        Args:
            severity: "blocking" | "warning" | "info"
            id: Custom rule ID (default: engine-assigned)
        """
        rule: Dict[str, Any] = {
            "name": "allowed_values",
            "params": {"column": self.column, "values": list(self.sample_values)},
            "severity": severity,
        }
        if id is not None:
            rule["id"] = id
        return rule


class Suggestions:
    """
    Collection of constraint suggestions for a dataset.

    Methods:
        to_yaml(): Export as YAML
        to_json(): Export as JSON
        to_dict(): Export as list of dicts
        to_rules(): Export as inline rule dicts
        save(path): Save YAML to file
        filter(column=None, rule=None): Filter suggestions
    """

    def __init__(
        self,
        suggestions: List[ConstraintSuggestion],
        source: str = "unknown",
    ):
        self._suggestions = list(suggestions)
        self.source = source

    def __repr__(self) -> str:
        return f"Suggestions({len(self._suggestions)} constraints from {self.source})"

    def __len__(self) -> int:
        return len(self._suggestions)

    def __iter__(self) -> Iterator[ConstraintSuggestion]:
        return iter(self._suggestions)

    def __getitem__(self, index: int) -> ConstraintSuggestion:
        return self._suggestions[index]

    def filter(
        self,
        column: Optional[str] = None,
        rule: Optional[type] = None,
    ) -> "Suggestions":
        """
        Filter suggestions by criteria.

        Args:
            column: Keep only suggestions for this column
            rule: Keep only suggestions produced by this rule class

        Returns:
            New Suggestions with filtered entries
        """
        filtered = self._suggestions

        if column is not None:
            filtered = [s for s in filtered if s.column == column]

        if rule is not None:
            filtered = [s for s in filtered if isinstance(s.rule, rule)]

        return Suggestions(filtered, self.source)

    def to_dict(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self._suggestions]

    def to_rules(self, severity: str = "blocking") -> List[Dict[str, Any]]:
        return [s.to_rule(severity=severity) for s in self._suggestions]

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def to_yaml(self) -> str:
        doc = {
            "dataset": self.source,
            "suggestions": self.to_dict(),
        }
        return yaml.dump(doc, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def save(self, path: Union[str, Path]) -> None:
        """
        Save suggestions to file.

        Args:
            path: Output path (YAML format)
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_yaml())
