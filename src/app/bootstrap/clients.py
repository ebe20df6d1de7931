"""Factories de clientes externos: Redis e HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)


def create_async_redis_client(redis_url: str) -> AsyncRedis:
    """Cria cliente Redis assíncrono.

    Args:
        redis_url: URL de conexão (REDIS_URL).

    Raises:
        ValueError: Se redis_url vazio.
    """
    from redis.asyncio import Redis as AsyncRedis

    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: AsyncRedis = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
        retry_on_timeout=True,
    )

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("async_redis_client_created", extra={"host": host})
    return client


def create_http_client() -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient compartilhado (deadline por requisição)."""
    return httpx.AsyncClient(timeout=None)
