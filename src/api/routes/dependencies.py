"""Dependências FastAPI: serviços montados no lifespan (app.state)."""

from __future__ import annotations

from fastapi import HTTPException, Request

from ai.services.card_scanner import CardScannerService
from app.services.profile_service import ProfileService


def get_profile_service(request: Request) -> ProfileService:
    service = getattr(request.app.state, "profile_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Serviço de perfil indisponível")
    return service


def get_card_scanner(request: Request) -> CardScannerService:
    scanner = getattr(request.app.state, "card_scanner", None)
    if scanner is None:
        raise HTTPException(status_code=503, detail="Scanner de cartões indisponível")
    return scanner
