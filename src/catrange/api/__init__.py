# src/catrange/api/__init__.py
from catrange.api.results import ConstraintSuggestion, Suggestions

__all__ = ["ConstraintSuggestion", "Suggestions"]
