# src/catrange/scout/__init__.py
"""
Column profile types and a lightweight polars profiler.
"""

from catrange.scout.histogram import profile_frame, profile_series
from catrange.scout.types import (
    NULL_FIELD_REPLACEMENT,
    ColumnProfile,
    DataType,
    Distribution,
    DistributionValue,
)

__all__ = [
    "NULL_FIELD_REPLACEMENT",
    "ColumnProfile",
    "DataType",
    "Distribution",
    "DistributionValue",
    "profile_frame",
    "profile_series",
]
