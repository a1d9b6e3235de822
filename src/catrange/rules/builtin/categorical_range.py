# src/catrange/rules/builtin/categorical_range.py
from __future__ import annotations

from typing import Optional

from catrange import code_utils, sql_utils
from catrange.api.results import ConstraintSuggestion
from catrange.config.models import DEFAULT_MAX_UNIQUE_RATIO, RuleSettings
from catrange.constraints import ComplianceConstraint, is_one
from catrange.errors import ConfigError, InapplicableProfileError
from catrange.logging import get_logger
from catrange.rules.base import ConstraintRule
from catrange.rules.sorting import CategorySorter, by_descending_count, get_sorter
from catrange.scout.types import NULL_FIELD_REPLACEMENT, ColumnProfile, DataType

_logger = get_logger(__name__)

_CATEGORICAL_TYPES = (DataType.STRING, DataType.INTEGRAL)


class CategoricalRangeRule(ConstraintRule):
    """If we see a categorical range for a column, we suggest an IS IN (...) constraint."""

    rule_description = (
        "If we see a categorical range for a column, we suggest an IS IN (...) constraint"
    )

    def __init__(
        self,
        category_sorter: CategorySorter = by_descending_count,
        max_unique_ratio: float = DEFAULT_MAX_UNIQUE_RATIO,
    ):
        if not 0.0 <= max_unique_ratio <= 1.0:
            raise ConfigError(
                f"max_unique_ratio must be between 0 and 1, got {max_unique_ratio}"
            )
        self.category_sorter = category_sorter
        self.max_unique_ratio = max_unique_ratio

    def __str__(self) -> str:
        return f"CategoricalRangeRule(max_unique_ratio={self.max_unique_ratio})"

    @classmethod
    def from_settings(cls, settings: Optional[RuleSettings] = None) -> "CategoricalRangeRule":
        settings = settings or RuleSettings()
        return cls(
            category_sorter=get_sorter(settings.ordering),
            max_unique_ratio=settings.max_unique_ratio,
        )

    def _inapplicable_reason(self, profile: ColumnProfile) -> Optional[str]:
        histogram = profile.histogram
        if histogram is None:
            return "profile has no histogram"
        if profile.data_type not in _CATEGORICAL_TYPES:
            return f"data type {profile.data_type} is not categorical"
        # Empty or null-only histograms have no categories to enumerate
        if len(histogram) == 0 or histogram.has_only_nulls:
            return "histogram has no non-null values"

        num_unique = sum(1 for _, value in histogram.items() if value.absolute == 1)
        unique_ratio = num_unique / len(histogram)

        if unique_ratio > self.max_unique_ratio:
            return (
                f"unique value ratio {unique_ratio:.3f} exceeds {self.max_unique_ratio}"
            )
        return None

    def should_be_applied(self, profile: ColumnProfile, num_records: int) -> bool:
        # num_records is part of the rule interface; this rule only needs the histogram
        return self._inapplicable_reason(profile) is None

    def candidate(self, profile: ColumnProfile, num_records: int) -> ConstraintSuggestion:
        reason = self._inapplicable_reason(profile)
        if reason is not None:
            raise InapplicableProfileError(column=profile.column, reason=reason)

        not_null = [
            (key, value)
            for key, value in profile.histogram.items()
            if key != NULL_FIELD_REPLACEMENT
        ]
        categories = tuple(key for key, _ in self.category_sorter(not_null))

        categories_sql = sql_utils.in_list(categories)
        categories_code = code_utils.list_literal(categories)

        column = profile.column
        description = f"'{column}' has value range {categories_sql}"
        condition = f"{sql_utils.esc_ident(column)} IN ({categories_sql})"
        constraint = ComplianceConstraint(
            name=description,
            condition=condition,
            assertion=is_one,
            columns=(column,),
        )

        _logger.debug("suggesting %d categories for column %s", len(categories), column)

        return ConstraintSuggestion(
            constraint=constraint,
            column=column,
            current_value="Compliance: 1",
            description=description,
            rule=self,
            code_hint=f".isContainedIn({code_utils.lit_str(column)}, [{categories_code}])",
            sample_values=categories,
        )
