# src/catrange/config/models.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_UNIQUE_RATIO = 0.1


class RuleSettings(BaseModel):
    """
    Tunable parameters of the categorical range rule.
    """
    model_config = ConfigDict(extra="forbid")

    max_unique_ratio: float = Field(
        DEFAULT_MAX_UNIQUE_RATIO,
        ge=0.0,
        le=1.0,
        description="Largest share of single-occurrence values a categorical column may have.",
    )
    ordering: Literal["count", "category"] = Field(
        "count", description="Category order in suggestions: by descending count or alphabetical."
    )


class SuggestionSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    categorical_range: RuleSettings = Field(default_factory=RuleSettings)
