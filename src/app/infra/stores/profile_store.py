"""Implementações de store para o slot do perfil.

Memory: desenvolvimento/testes.
Redis: staging/produção.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from utils.errors import ProfileStoreUnavailableError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

PROFILE_SLOT_PREFIX = "profile:"


class MemoryProfileSlotStore:
    """Store em memória para desenvolvimento/testes."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    async def read(self, slot: str) -> str | None:
        return self._slots.get(slot)

    async def write(self, slot: str, text: str) -> None:
        self._slots[slot] = text

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None


class RedisProfileSlotStore:
    """Store Redis (async) para o slot do perfil.

    Args:
        redis_client: Cliente redis.asyncio.
        prefix: Prefixo das chaves no Redis.
    """

    def __init__(self, redis_client: AsyncRedis, prefix: str = PROFILE_SLOT_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = prefix

    def _key(self, slot: str) -> str:
        return f"{self._prefix}{slot}"

    async def read(self, slot: str) -> str | None:
        try:
            data = await self._redis.get(self._key(slot))
        except RedisError as exc:
            logger.warning(
                "profile_store_read_error",
                extra={"backend": "redis", "error_type": type(exc).__name__},
            )
            raise ProfileStoreUnavailableError("Falha ao ler o perfil no Redis") from exc

        if data is None:
            return None
        if isinstance(data, bytes):
            # Bytes inválidos viram U+FFFD; o JSON continua válido e o schema guard decide.
            return data.decode("utf-8", errors="replace")
        return str(data)

    async def write(self, slot: str, text: str) -> None:
        try:
            await self._redis.set(self._key(slot), text)
        except RedisError as exc:
            logger.warning(
                "profile_store_write_error",
                extra={"backend": "redis", "error_type": type(exc).__name__},
            )
            raise ProfileStoreUnavailableError("Falha ao gravar o perfil no Redis") from exc

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        await self._redis.aclose()
