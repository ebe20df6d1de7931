"""Settings do gateway de IA com visão (extração de cartões).

O gateway expõe um endpoint compatível com chat completions. Sem
AI_GATEWAY_API_KEY o scanner responde "não configurado" sem chamar a rede.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"


@dataclass(frozen=True)
class VisionGatewaySettings:
    """Configurações do gateway de visão.

    Attributes:
        url: Endpoint de chat completions
        api_key: Credencial bearer (nunca logada)
        model: Modelo; vazio usa o default do YAML do agente
        timeout_seconds: Deadline da chamada; None = sem deadline
        enabled: Se o scanner de cartões está habilitado
    """

    url: str = DEFAULT_GATEWAY_URL
    api_key: str = ""
    model: str = ""
    timeout_seconds: float | None = None
    enabled: bool = True

    @property
    def is_configured(self) -> bool:
        """True quando há credencial e o scanner está habilitado."""
        return self.enabled and bool(self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações do gateway.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.enabled and not self.api_key:
            errors.append("AI_GATEWAY_API_KEY não configurado mas CARD_SCANNER_ENABLED=true")

        if not self.url.startswith("https://"):
            errors.append("AI_GATEWAY_URL deve usar https")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("AI_GATEWAY_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        # Texto inválido vira -1 e é reportado por validate().
        return -1.0


def _load_vision_gateway_from_env() -> VisionGatewaySettings:
    """Carrega VisionGatewaySettings de variáveis de ambiente."""
    return VisionGatewaySettings(
        url=os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
        api_key=os.getenv("AI_GATEWAY_API_KEY", ""),
        model=os.getenv("AI_GATEWAY_MODEL", ""),
        timeout_seconds=_parse_timeout(os.getenv("AI_GATEWAY_TIMEOUT_SECONDS", "")),
        enabled=os.getenv("CARD_SCANNER_ENABLED", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_vision_gateway_settings() -> VisionGatewaySettings:
    """Retorna instância cacheada de VisionGatewaySettings."""
    return _load_vision_gateway_from_env()
