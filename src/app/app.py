"""Entrypoint da aplicação de cartão de visita.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_error_handlers
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client
from app.bootstrap.dependencies import (
    create_card_scanner,
    create_profile_service,
    create_profile_store,
)
from app.observability import CORRELATION_HEADER, CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria store do perfil e carrega o record (uma vez)
    - Cria cliente HTTP compartilhado e o scanner

    Shutdown:
    - Fecha cliente HTTP e conexão Redis
    """
    logger.info("app_starting")
    validate_runtime_settings()

    store = create_profile_store()
    profile_service = create_profile_service(store)
    await profile_service.load()

    http_client = create_http_client()
    app.state.profile_store = store
    app.state.profile_service = profile_service
    app.state.http_client = http_client
    app.state.card_scanner = create_card_scanner(http_client)

    yield

    logger.info("app_shutting_down")
    await http_client.aclose()
    await store.close()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Cartão de Visita",
        description="Perfil de contato digital com scan de cartões",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None if base.is_production else "/redoc",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    fastapi_app.include_router(create_api_router())
    register_error_handlers(fastapi_app)

    logger.info("app_configured", extra={"environment": base.environment})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting cartao_visita in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
