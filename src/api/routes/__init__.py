"""Rotas HTTP da API.

Estrutura:
- routes/health/: health checks e readiness
- routes/scan/: scan de cartão de visita
- routes/profile/: leitura, edição e compartilhamento do perfil

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router, register_error_handlers

__all__ = ["create_api_router", "register_error_handlers"]
