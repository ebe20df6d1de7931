"""Exceções de domínio para falhas recuperáveis de infraestrutura e do gateway de visão."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ProfileStoreUnavailableError(InfrastructureError):
    """Falha de conexão/timeout ao acessar o slot de persistência do perfil."""


class VisionGatewayError(InfrastructureError):
    """Base para falhas na chamada ao modelo de visão."""


class GatewayNotConfiguredError(VisionGatewayError):
    """API key ou URL do gateway ausente."""


class RateLimitedError(VisionGatewayError):
    """Gateway respondeu 429 (limite de requisições)."""


class QuotaExhaustedError(VisionGatewayError):
    """Gateway respondeu 402 (créditos/cota esgotados)."""


class UpstreamStatusError(VisionGatewayError):
    """Gateway respondeu com status não-2xx sem categoria específica."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Gateway de IA respondeu com status {status_code}")
        self.status_code = status_code


class UpstreamTransportError(VisionGatewayError):
    """Falha de rede/timeout antes de obter resposta do gateway."""
