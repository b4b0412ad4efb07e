"""Environment-driven settings for circular lists.

Supported variables (default prefix ``CIRCULARLIST_``):
- {prefix}EQUALITY_STRATEGY ("linear" or "naive")
- {prefix}FAIL_FAST_ITERATION (bool)
- {prefix}LOG_LEVEL (standard logging level name)
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from circularlist.types import DEFAULT_EQUALITY_STRATEGY, EqualityStrategy


DEFAULT_PREFIX = "CIRCULARLIST_"

_ENV_FIELDS: Dict[str, str] = {
    "EQUALITY_STRATEGY": "equality_strategy",
    "FAIL_FAST_ITERATION": "fail_fast_iteration",
    "LOG_LEVEL": "log_level",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CircularListSettings(BaseModel):
    equality_strategy: EqualityStrategy = DEFAULT_EQUALITY_STRATEGY
    fail_fast_iteration: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return normalized

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _raw_values(prefix: str, env: Mapping[str, str]) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = env.get(f"{prefix}{suffix}")
        if value is None:
            continue
        raw[field_name] = value.strip()
    return raw


def settings_from_env(
    prefix: str = DEFAULT_PREFIX,
    env: Optional[Mapping[str, str]] = None,
) -> CircularListSettings:
    """Build settings from environment variables with sane defaults.

    A value that fails validation falls back to its default; use
    :func:`validate_settings_environment` to surface such values instead.
    """
    active_env = os.environ if env is None else env

    accepted: Dict[str, Any] = {}
    for field_name, value in _raw_values(prefix, active_env).items():
        try:
            CircularListSettings.model_validate({field_name: value})
        except ValidationError:
            continue
        accepted[field_name] = value

    return CircularListSettings.model_validate(accepted)


def validate_settings_environment(
    prefix: str = DEFAULT_PREFIX,
    env: Optional[Mapping[str, str]] = None,
) -> CircularListSettings:
    active_env = os.environ if env is None else env
    field_to_env = {field_name: f"{prefix}{suffix}" for suffix, field_name in _ENV_FIELDS.items()}

    try:
        return CircularListSettings.model_validate(_raw_values(prefix, active_env))
    except ValidationError as exc:
        errors: list[str] = []
        for error in exc.errors():
            field_name = str(error["loc"][0]) if error["loc"] else ""
            env_name = field_to_env.get(field_name, field_name)
            errors.append(f"{env_name}: {error['msg']}")
        error_lines = "\n- ".join(errors)
        raise RuntimeError(f"Invalid circularlist environment:\n- {error_lines}") from exc


_SETTINGS: Optional[CircularListSettings] = None


def get_settings() -> CircularListSettings:
    """Return process-wide settings, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = settings_from_env()
    return _SETTINGS


def reset_settings_cache() -> None:
    global _SETTINGS
    _SETTINGS = None
