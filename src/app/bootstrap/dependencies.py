"""Factories de stores e serviços conforme settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai.services.card_scanner import CardScannerService
from app.bootstrap.clients import create_async_redis_client
from app.infra.ai.vision_gateway_client import VisionGatewayClient
from app.infra.stores.profile_store import MemoryProfileSlotStore, RedisProfileSlotStore
from app.services.profile_service import ProfileService
from config.settings import (
    StorageSettings,
    VisionGatewaySettings,
    get_storage_settings,
    get_vision_gateway_settings,
)

if TYPE_CHECKING:
    import httpx

    from app.protocols.profile_store import ProfileSlotStoreProtocol

logger = logging.getLogger(__name__)


def create_profile_store(settings: StorageSettings | None = None) -> ProfileSlotStoreProtocol:
    """Cria o store do slot do perfil conforme PROFILE_STORE_BACKEND."""
    cfg = settings or get_storage_settings()
    if cfg.backend == "redis":
        logger.info("profile_store_selected", extra={"backend": "redis"})
        return RedisProfileSlotStore(create_async_redis_client(cfg.redis_url))
    logger.info("profile_store_selected", extra={"backend": "memory"})
    return MemoryProfileSlotStore()


def create_profile_service(
    store: ProfileSlotStoreProtocol | None = None,
    settings: StorageSettings | None = None,
) -> ProfileService:
    cfg = settings or get_storage_settings()
    return ProfileService(store or create_profile_store(cfg), slot_key=cfg.slot_key)


def create_card_scanner(
    http_client: httpx.AsyncClient,
    settings: VisionGatewaySettings | None = None,
) -> CardScannerService:
    """Cria o scanner com o cliente do gateway de visão."""
    cfg = settings or get_vision_gateway_settings()
    client = VisionGatewayClient(http_client, cfg)
    return CardScannerService(client, model=cfg.model or None)
