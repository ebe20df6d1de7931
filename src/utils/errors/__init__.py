"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    GatewayNotConfiguredError,
    InfrastructureError,
    ProfileStoreUnavailableError,
    QuotaExhaustedError,
    RateLimitedError,
    UpstreamStatusError,
    UpstreamTransportError,
    VisionGatewayError,
)

__all__ = [
    "GatewayNotConfiguredError",
    "InfrastructureError",
    "ProfileStoreUnavailableError",
    "QuotaExhaustedError",
    "RateLimitedError",
    "UpstreamStatusError",
    "UpstreamTransportError",
    "VisionGatewayError",
]
