"""Agregador de settings de gateways externos."""

from __future__ import annotations

from config.settings.gateway.vision import (
    DEFAULT_GATEWAY_URL,
    VisionGatewaySettings,
    get_vision_gateway_settings,
)

__all__ = [
    "DEFAULT_GATEWAY_URL",
    "VisionGatewaySettings",
    "get_vision_gateway_settings",
]
