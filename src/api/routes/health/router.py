"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: store do perfil é crítico; gateway é degradável."""
    store_check = await _check_profile_store(getattr(request.app.state, "profile_store", None))
    gateway_check = _check_gateway(getattr(request.app.state, "card_scanner", None))

    ready = store_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "profile_store": store_check.as_dict(),
            "vision_gateway": gateway_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_profile_store(store: Any | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        alive = await asyncio.wait_for(store.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_store_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    if not alive:
        return DependencyCheck(status="failed", error="unreachable")
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _check_gateway(scanner: Any | None) -> DependencyCheck:
    if scanner is None or not scanner.is_configured:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
