"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.profile_loader import DefaultReason, LoadOutcome, LoadResult, load_or_default
from app.services.profile_service import ProfileService, SubmitResult

__all__ = [
    "DefaultReason",
    "LoadOutcome",
    "LoadResult",
    "ProfileService",
    "SubmitResult",
    "load_or_default",
]
