# src/catrange/config/loader.py
"""
Load suggestion settings from YAML.

Example file:

    categorical_range:
      max_unique_ratio: 0.05
      ordering: category

CATRANGE_MAX_UNIQUE_RATIO, when set, overrides the file value.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from catrange.config.models import SuggestionSettings
from catrange.errors import ConfigError
from catrange.logging import get_logger, log_exception

_logger = get_logger(__name__)

ENV_MAX_UNIQUE_RATIO = "CATRANGE_MAX_UNIQUE_RATIO"


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    ratio = os.getenv(ENV_MAX_UNIQUE_RATIO)
    if ratio:
        section = dict(raw.get("categorical_range") or {})
        section["max_unique_ratio"] = ratio
        raw = {**raw, "categorical_range": section}
        _logger.debug("max_unique_ratio overridden from environment: %s", ratio)
    return raw


def settings_from_dict(raw: Optional[Dict[str, Any]]) -> SuggestionSettings:
    """Validate a plain dict (e.g. parsed YAML) into SuggestionSettings."""
    raw = _apply_env_overrides(dict(raw or {}))
    try:
        return SuggestionSettings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid suggestion settings: {e}") from e


def load_settings(path: Optional[Union[str, Path]] = None) -> SuggestionSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file path. None returns defaults (plus env overrides).

    Raises:
        ConfigError: File missing, unreadable YAML, or invalid values
    """
    if path is None:
        return settings_from_dict({})

    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        log_exception(_logger, f"Failed to parse settings file {path}", e)
        raise ConfigError(f"Settings file {path} is not valid YAML") from e

    if raw is not None and not isinstance(raw, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping at the top level")

    return settings_from_dict(raw)
