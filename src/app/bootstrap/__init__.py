"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_storage_settings,
    get_vision_gateway_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"gateway: {error}" for error in get_vision_gateway_settings().validate())
    strict = base.strict_validation
    errors.extend(f"storage: {error}" for error in get_storage_settings().validate(strict))
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Em ambiente estrito com settings inválidas.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = base.strict_validation
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
