"""Protocolo para cliente de visão usado pelo scanner de cartões."""

from __future__ import annotations

from typing import Any, Protocol


class VisionClientProtocol(Protocol):
    """Contrato para clientes de chat completions com visão.

    Implementações fazem exatamente uma requisição por chamada e
    levantam subclasses de VisionGatewayError em falhas HTTP/transporte.
    """

    @property
    def is_configured(self) -> bool:
        """True quando há credencial para chamar o gateway."""
        ...

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> str | None:
        """Retorna choices[0].message.content, ou None se ausente."""
        ...
