# src/catrange/rules/sorting.py
"""
Category ordering strategies.

An ordering function takes (category, DistributionValue) pairs and returns
them in the order they should appear in a suggestion.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from catrange.scout.types import DistributionValue

Category = Tuple[str, DistributionValue]
CategorySorter = Callable[[Sequence[Category]], List[Category]]


def by_descending_count(categories: Sequence[Category]) -> List[Category]:
    """Most frequent first; ties keep histogram order."""
    return sorted(categories, key=lambda item: item[1].absolute, reverse=True)


def by_category(categories: Sequence[Category]) -> List[Category]:
    """Alphabetical by category value."""
    return sorted(categories, key=lambda item: item[0])


SORTERS = {
    "count": by_descending_count,
    "category": by_category,
}


def get_sorter(name: str) -> CategorySorter:
    try:
        return SORTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown category ordering '{name}'. Available: {', '.join(sorted(SORTERS))}"
        ) from None
