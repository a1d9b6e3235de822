# src/catrange/scout/types.py
"""
Profile data types consumed by suggestion rules.

Profiles are produced once per column per profiling run and are read-only
from the rules' point of view.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

# Histogram key standing in for null / missing values.
NULL_FIELD_REPLACEMENT = "NullValue"


class DataType(str, Enum):
    """Inferred column type."""

    STRING = "String"
    INTEGRAL = "Integral"
    FRACTIONAL = "Fractional"
    BOOLEAN = "Boolean"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: Optional[str]) -> "DataType":
        """Parse a type name case-insensitively, defaulting to UNKNOWN."""
        if value is None:
            return cls.UNKNOWN
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class DistributionValue:
    """Occurrence count of one category and its share of all records."""

    absolute: int
    ratio: float

    def __post_init__(self) -> None:
        if self.absolute < 0:
            raise ValueError(f"absolute count must be non-negative, got {self.absolute}")

    def to_dict(self) -> Dict[str, Any]:
        return {"absolute": self.absolute, "ratio": self.ratio}


@dataclass(frozen=True)
class Distribution:
    """
    Histogram of a column: category value -> DistributionValue.

    Keys are unique. The NULL_FIELD_REPLACEMENT key, when present, counts
    null values.
    """

    values: Mapping[str, DistributionValue]
    number_of_bins: int = -1

    def __post_init__(self) -> None:
        # Freeze a private copy so callers can't mutate the profile afterwards
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        if self.number_of_bins < 0:
            object.__setattr__(self, "number_of_bins", len(self.values))

    def __hash__(self) -> int:
        # mappingproxy is unhashable; hash the frozen contents instead
        return hash((tuple(self.values.items()), self.number_of_bins))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __getitem__(self, key: str) -> DistributionValue:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def items(self) -> Iterator[Tuple[str, DistributionValue]]:
        return iter(self.values.items())

    @property
    def has_only_nulls(self) -> bool:
        """True when every bin is the null placeholder (an empty histogram included)."""
        return all(key == NULL_FIELD_REPLACEMENT for key in self.values)

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> "Distribution":
        """Build a distribution from raw counts; ratios are relative to the total."""
        total = sum(counts.values())
        return cls(
            {
                key: DistributionValue(
                    absolute=int(count),
                    ratio=(count / total) if total > 0 else 0.0,
                )
                for key, count in counts.items()
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number_of_bins": self.number_of_bins,
            "values": {key: value.to_dict() for key, value in self.values.items()},
        }


@dataclass(frozen=True)
class ColumnProfile:
    """Statistical summary of a single column."""

    column: str
    data_type: DataType
    histogram: Optional[Distribution] = None
    completeness: float = 1.0
    approximate_num_distinct_values: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.column,
            "data_type": str(self.data_type),
            "completeness": self.completeness,
            "approximate_num_distinct_values": self.approximate_num_distinct_values,
            "histogram": self.histogram.to_dict() if self.histogram is not None else None,
        }
