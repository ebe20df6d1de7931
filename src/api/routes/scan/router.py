"""Endpoint de scan de cartão de visita.

Corpo `{imageData}`; resposta `{success, data}` ou `{success, error}`.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ai.models.card_extraction import ScanErrorKind, ScanResult
from ai.services.card_scanner import CardScannerService
from api.routes.dependencies import get_card_scanner

logger = logging.getLogger(__name__)

router = APIRouter()

STATUS_BY_ERROR_KIND: dict[ScanErrorKind, int] = {
    ScanErrorKind.INVALID_INPUT: 400,
    ScanErrorKind.NOT_CONFIGURED: 500,
    ScanErrorKind.RATE_LIMITED: 429,
    ScanErrorKind.QUOTA_EXHAUSTED: 402,
    ScanErrorKind.UPSTREAM_ERROR: 502,
    ScanErrorKind.PARSE_FAILED: 502,
    ScanErrorKind.UNEXPECTED: 500,
}


def scan_status_code(result: ScanResult) -> int:
    if result.success or result.error_kind is None:
        return 200
    return STATUS_BY_ERROR_KIND[result.error_kind]


@router.post("/scan-business-card")
async def scan_business_card(
    scanner: Annotated[CardScannerService, Depends(get_card_scanner)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> JSONResponse:
    """Extrai dados de contato de uma imagem de cartão."""
    result = await scanner.scan((payload or {}).get("imageData"))
    return JSONResponse(content=result.to_payload(), status_code=scan_status_code(result))
