"""Agregador de settings de storage."""

from __future__ import annotations

from config.settings.storage.profile import (
    DEFAULT_PROFILE_SLOT_KEY,
    ProfileStoreBackend,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    "DEFAULT_PROFILE_SLOT_KEY",
    "ProfileStoreBackend",
    "StorageSettings",
    "get_storage_settings",
]
