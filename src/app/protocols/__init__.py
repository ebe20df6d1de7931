"""Protocolos e contratos do core da aplicação."""

from .profile_store import ProfileSlotStoreProtocol

__all__ = [
    "ProfileSlotStoreProtocol",
]
