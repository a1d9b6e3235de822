# Builtin suggestion rules
from catrange.rules.builtin.categorical_range import CategoricalRangeRule

__all__ = [
    "CategoricalRangeRule",
]
