"""Settings do storage do perfil de contato.

Backends:
- memory: dev/testes (perde dados ao reiniciar)
- redis: staging/produção
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ProfileStoreBackend = Literal["memory", "redis"]

DEFAULT_PROFILE_SLOT_KEY = "contactData"


@dataclass(frozen=True)
class StorageSettings:
    """Configurações do storage do perfil.

    Attributes:
        backend: memory|redis
        redis_url: URL de conexão Redis (obrigatória para backend redis)
        slot_key: Chave do slot único do perfil
    """

    backend: ProfileStoreBackend = "memory"
    redis_url: str = ""
    slot_key: str = DEFAULT_PROFILE_SLOT_KEY

    def validate(self, is_production: bool = False) -> list[str]:
        """Valida configurações de storage.

        Args:
            is_production: Em staging/produção o backend memory é proibido.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"PROFILE_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL obrigatório quando PROFILE_STORE_BACKEND=redis")

        if is_production and self.backend == "memory":
            errors.append("PROFILE_STORE_BACKEND=memory não é permitido fora de development")

        if not self.slot_key:
            errors.append("PROFILE_SLOT_KEY não pode ser vazio")

        return errors


def _parse_backend(raw: str) -> ProfileStoreBackend:
    value = raw.strip().lower()
    if value == "redis":
        return "redis"
    return "memory"


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    return StorageSettings(
        backend=_parse_backend(os.getenv("PROFILE_STORE_BACKEND", "memory")),
        redis_url=os.getenv("REDIS_URL", ""),
        slot_key=os.getenv("PROFILE_SLOT_KEY", DEFAULT_PROFILE_SLOT_KEY),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
