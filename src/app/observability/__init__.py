"""Observabilidade: correlation_id para logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    CorrelationIdMiddleware,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "CorrelationIdMiddleware",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
