"""Stores: implementações concretas do slot do perfil.

Módulos disponíveis:
    - profile_store: Memory (dev/testes) e Redis (staging/produção)
"""

from __future__ import annotations

from app.infra.stores.profile_store import MemoryProfileSlotStore, RedisProfileSlotStore

__all__ = [
    "MemoryProfileSlotStore",
    "RedisProfileSlotStore",
]
