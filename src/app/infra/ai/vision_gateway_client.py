"""Cliente HTTP do gateway de IA com visão (chat completions).

Implementação concreta de IO. Faz exatamente um POST por chamada, sem
retry, e traduz status/transporte em exceções de utils.errors.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from config.settings.gateway.vision import VisionGatewaySettings, get_vision_gateway_settings
from utils.errors import (
    GatewayNotConfiguredError,
    QuotaExhaustedError,
    RateLimitedError,
    UpstreamStatusError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

_MAX_LOGGED_BODY = 500


class VisionGatewayClient:
    """Cliente async do gateway de visão.

    Args:
        http_client: Cliente httpx compartilhado (lifespan da app).
        settings: Settings do gateway (default: env).
    """

    __slots__ = ("_http_client", "_settings")

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: VisionGatewaySettings | None = None,
    ) -> None:
        self._http_client = http_client
        self._settings = settings or get_vision_gateway_settings()

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> str | None:
        """Envia a requisição e retorna choices[0].message.content.

        Returns:
            Conteúdo textual, ou None quando a resposta não o contém.

        Raises:
            GatewayNotConfiguredError: Sem credencial.
            RateLimitedError: HTTP 429.
            QuotaExhaustedError: HTTP 402.
            UpstreamStatusError: Outro status não-2xx.
            UpstreamTransportError: Timeout/conexão/corpo não-JSON.
        """
        if not self.is_configured:
            raise GatewayNotConfiguredError("AI_GATEWAY_API_KEY não configurado")

        headers = {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"model": model, "messages": messages}

        try:
            response = await self._http_client.post(
                self._settings.url,
                headers=headers,
                json=payload,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "vision_gateway_timeout",
                extra={"timeout": self._settings.timeout_seconds},
            )
            raise UpstreamTransportError("Tempo esgotado ao chamar o gateway de IA") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "vision_gateway_transport_error",
                extra={"error_type": type(exc).__name__},
            )
            raise UpstreamTransportError("Falha de conexão com o gateway de IA") from exc

        if not response.is_success:
            _raise_for_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("vision_gateway_invalid_body", extra={"status_code": response.status_code})
            raise UpstreamTransportError("Resposta do gateway de IA não é JSON") from exc

        content = _message_content(data)
        logger.debug(
            "vision_gateway_call_success",
            extra={"model": model, "has_content": content is not None},
        )
        return content


def _raise_for_status(response: httpx.Response) -> None:
    status = response.status_code
    logger.warning(
        "vision_gateway_http_error",
        extra={"status_code": status, "response_text": response.text[:_MAX_LOGGED_BODY]},
    )
    if status == 429:
        raise RateLimitedError("Gateway de IA limitou as requisições")
    if status == 402:
        raise QuotaExhaustedError("Gateway de IA sem créditos")
    raise UpstreamStatusError(status)


def _message_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content.strip():
        return content
    return None
