# src/catrange/scout/histogram.py
"""
Build ColumnProfile objects from in-memory polars data.

This only computes value counts; it is a convenience for callers that hold a
DataFrame and want to run suggestion rules without a full profiling pass.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import polars as pl

from catrange.logging import get_logger

from .types import NULL_FIELD_REPLACEMENT, ColumnProfile, DataType, Distribution

_logger = get_logger(__name__)


def _map_dtype(dtype: pl.DataType) -> DataType:
    """Map a polars dtype onto the profile type lattice."""
    if dtype.is_integer():
        return DataType.INTEGRAL
    if dtype.is_float() or dtype.is_decimal():
        return DataType.FRACTIONAL
    if dtype == pl.Boolean:
        return DataType.BOOLEAN
    if dtype in (pl.String, pl.Categorical, pl.Enum):
        return DataType.STRING
    return DataType.UNKNOWN


def profile_series(series: pl.Series, column: Optional[str] = None) -> ColumnProfile:
    """
    Profile one polars Series.

    Args:
        series: Column data
        column: Column name override (default: series.name)

    Returns:
        ColumnProfile with a histogram keyed by the stringified values.
        Nulls are counted under NULL_FIELD_REPLACEMENT.
    """
    name = column if column is not None else series.name
    data_type = _map_dtype(series.dtype)

    counts: Dict[str, int] = {}
    # value_counts names its count column "count"; rename so it cannot collide
    for value, count in series.alias("value").value_counts(sort=False).iter_rows():
        key = NULL_FIELD_REPLACEMENT if value is None else str(value)
        # Distinct raw values can share a string form (e.g. categoricals)
        counts[key] = counts.get(key, 0) + int(count)

    total = series.len()
    non_null = total - series.null_count()
    completeness = non_null / total if total > 0 else 1.0

    _logger.debug(
        "profiled column %s: type=%s bins=%d rows=%d", name, data_type, len(counts), total
    )

    return ColumnProfile(
        column=name,
        data_type=data_type,
        histogram=Distribution.from_counts(counts),
        completeness=completeness,
        approximate_num_distinct_values=sum(1 for k in counts if k != NULL_FIELD_REPLACEMENT),
    )


def profile_frame(df: pl.DataFrame) -> List[ColumnProfile]:
    """Profile every column of a DataFrame, in column order."""
    return [profile_series(df.get_column(name)) for name in df.columns]
