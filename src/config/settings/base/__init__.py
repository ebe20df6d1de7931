"""Settings base: ambiente, logging e CORS."""

from __future__ import annotations

from config.settings.base.core import (
    STRICT_VALIDATION_ENVS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "STRICT_VALIDATION_ENVS",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
