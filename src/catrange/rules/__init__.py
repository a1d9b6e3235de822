# src/catrange/rules/__init__.py
from catrange.rules.base import ConstraintRule
from catrange.rules.sorting import by_category, by_descending_count

__all__ = ["ConstraintRule", "by_category", "by_descending_count"]
