# src/catrange/config/__init__.py
from catrange.config.loader import load_settings, settings_from_dict
from catrange.config.models import DEFAULT_MAX_UNIQUE_RATIO, RuleSettings, SuggestionSettings

__all__ = [
    "DEFAULT_MAX_UNIQUE_RATIO",
    "RuleSettings",
    "SuggestionSettings",
    "load_settings",
    "settings_from_dict",
]
