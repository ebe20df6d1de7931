"""Configuração centralizada de logging.

Um único StreamHandler no root logger, com formatter JSON e filtro
que injeta correlation_id/service. Chamado uma vez pelo bootstrap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "cartao_visita"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Nome do serviço gravado em todo registro.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex.: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service/correlation_id vêm do filter)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um valor default substituiu o resultado esperado.

    Usado pelo loader de perfil quando o slot persistido está vazio,
    corrompido ou fora do schema.

    Args:
        logger: Logger do chamador.
        component: Componente que aplicou o fallback (ex.: "profile_loader").
        reason: Motivo curto, sem PII (ex.: "invalid_json").
        elapsed_ms: Tempo decorrido, quando aplicável.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("Fallback applied for %s", component, extra=extra)
