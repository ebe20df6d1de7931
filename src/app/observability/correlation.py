"""Correlation_id por requisição HTTP, injetado em todos os logs.

Usa ContextVar para ser async-safe. O middleware aceita o header
X-Correlation-ID do cliente (se bem formado) ou gera um novo, e o
devolve na resposta.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

CORRELATION_HEADER = "X-Correlation-ID"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Header do cliente vai para os logs: só caracteres seguros e tamanho curto.
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou malformado, gera um novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if not correlation_id or not _VALID_CORRELATION_ID.fullmatch(correlation_id):
        correlation_id = generate_correlation_id()
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Define o correlation_id durante a requisição e o ecoa na resposta."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            return response
        finally:
            reset_correlation_id(token)
