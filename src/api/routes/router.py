"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router, register_error_handlers

    app = FastAPI()
    app.include_router(create_api_router())
    register_error_handlers(app)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from api.routes.health.router import router as health_router
from api.routes.profile.router import router as profile_router
from api.routes.scan.router import router as scan_router
from utils.errors import InfrastructureError

logger = logging.getLogger(__name__)


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(scan_router, tags=["scan"])
    api_router.include_router(profile_router, prefix="/profile", tags=["profile"])

    return api_router


async def _infrastructure_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "infrastructure_unavailable",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        content={"error": "Serviço temporariamente indisponível"},
        status_code=503,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Falhas de infraestrutura viram 503 sem alterar estado."""
    app.add_exception_handler(InfrastructureError, _infrastructure_error_handler)
