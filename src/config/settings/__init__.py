"""Agregador de settings do serviço de cartão de visita.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Gateway settings
from config.settings.gateway import (
    DEFAULT_GATEWAY_URL,
    VisionGatewaySettings,
    get_vision_gateway_settings,
)

# Storage settings
from config.settings.storage import (
    DEFAULT_PROFILE_SLOT_KEY,
    ProfileStoreBackend,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    "DEFAULT_GATEWAY_URL",
    "DEFAULT_PROFILE_SLOT_KEY",
    "BaseSettings",
    "Environment",
    "ProfileStoreBackend",
    "StorageSettings",
    "VisionGatewaySettings",
    "get_base_settings",
    "get_storage_settings",
    "get_vision_gateway_settings",
]
