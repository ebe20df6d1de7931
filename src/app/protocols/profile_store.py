"""Protocolo para o slot de persistência do perfil."""

from __future__ import annotations

from typing import Protocol


class ProfileSlotStoreProtocol(Protocol):
    """Contrato de um store chave-valor de texto (um slot por perfil).

    Implementações levantam ProfileStoreUnavailableError em falhas de IO.
    """

    async def read(self, slot: str) -> str | None:
        """Retorna o texto gravado no slot, ou None se vazio."""
        ...

    async def write(self, slot: str, text: str) -> None:
        """Sobrescreve o slot com o texto."""
        ...

    async def ping(self) -> bool:
        """Retorna True se o backend responde."""
        ...

    async def close(self) -> None:
        """Libera conexões do backend."""
        ...
