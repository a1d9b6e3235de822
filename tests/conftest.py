from typing import Dict, Optional

import pytest

from catrange.scout.types import ColumnProfile, DataType, Distribution


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep settings overrides from leaking between tests."""
    monkeypatch.delenv("CATRANGE_MAX_UNIQUE_RATIO", raising=False)


def make_profile(
    counts: Optional[Dict[str, int]],
    data_type: DataType = DataType.STRING,
    column: str = "col",
) -> ColumnProfile:
    """Build a profile from raw category counts (None -> no histogram)."""
    histogram = Distribution.from_counts(counts) if counts is not None else None
    return ColumnProfile(column=column, data_type=data_type, histogram=histogram)


@pytest.fixture
def profile_factory():
    return make_profile
