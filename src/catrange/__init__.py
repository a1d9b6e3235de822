# src/catrange/__init__.py
"""
catrange - categorical range constraint suggestions

Usage:
    import polars as pl
    import catrange

    df = pl.DataFrame({"status": ["active"] * 8 + ["inactive"] * 2})
    profiles = catrange.profile_frame(df)
    suggestions = catrange.suggest_constraints(profiles, num_records=df.height)

    for s in suggestions:
        print(s.description)   # 'status' has value range 'active', 'inactive'
        print(s.code_hint)     # .isContainedIn("status", ["active", "inactive"])

    # Custom threshold / ordering
    rule = catrange.CategoricalRangeRule(
        category_sorter=catrange.by_category,
        max_unique_ratio=0.05,
    )
    if rule.should_be_applied(profiles[0], df.height):
        suggestion = rule.candidate(profiles[0], df.height)
"""

from typing import List, Optional, Sequence

from catrange.version import VERSION as __version__

from catrange.api.results import ConstraintSuggestion, Suggestions
from catrange.config import RuleSettings, SuggestionSettings, load_settings
from catrange.constraints import ComplianceConstraint, is_one
from catrange.errors import CatrangeError, ConfigError, InapplicableProfileError
from catrange.logging import get_logger
from catrange.rules.base import ConstraintRule
from catrange.rules.builtin.categorical_range import CategoricalRangeRule
from catrange.rules.sorting import by_category, by_descending_count
from catrange.scout import (
    NULL_FIELD_REPLACEMENT,
    ColumnProfile,
    DataType,
    Distribution,
    DistributionValue,
    profile_frame,
    profile_series,
)

_logger = get_logger(__name__)


def default_rules(settings: Optional[SuggestionSettings] = None) -> List[ConstraintRule]:
    """Rules applied by suggest_constraints() when none are given."""
    settings = settings or load_settings()
    return [CategoricalRangeRule.from_settings(settings.categorical_range)]


def suggest_constraints(
    profiles: Sequence[ColumnProfile],
    num_records: int,
    rules: Optional[Sequence[ConstraintRule]] = None,
    *,
    source: str = "unknown",
) -> Suggestions:
    """
    Run suggestion rules over column profiles.

    Args:
        profiles: One ColumnProfile per column
        num_records: Total row count of the profiled dataset
        rules: Rules to apply (default: default_rules())
        source: Dataset label carried into exports

    Returns:
        Suggestions, in profile order then rule order
    """
    if num_records < 0:
        raise ValueError(f"num_records must be non-negative, got {num_records}")

    active_rules = list(rules) if rules is not None else default_rules()
    found: List[ConstraintSuggestion] = []

    for profile in profiles:
        for rule in active_rules:
            if rule.should_be_applied(profile, num_records):
                found.append(rule.candidate(profile, num_records))
            else:
                _logger.debug("%s does not apply to column %s", rule, profile.column)

    _logger.info(
        "%d suggestion(s) for %d column(s) from %s", len(found), len(profiles), source
    )
    return Suggestions(found, source=source)


__all__ = [
    "__version__",
    "CatrangeError",
    "CategoricalRangeRule",
    "ColumnProfile",
    "ComplianceConstraint",
    "ConfigError",
    "ConstraintRule",
    "ConstraintSuggestion",
    "DataType",
    "Distribution",
    "DistributionValue",
    "InapplicableProfileError",
    "NULL_FIELD_REPLACEMENT",
    "RuleSettings",
    "SuggestionSettings",
    "Suggestions",
    "by_category",
    "by_descending_count",
    "default_rules",
    "is_one",
    "load_settings",
    "profile_frame",
    "profile_series",
    "suggest_constraints",
]
