"""Logging estruturado JSON do serviço de cartão de visita.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="cartao_visita")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("card_scan_succeeded", extra={"fields_count": 4})

Todo log carrega correlation_id e service. Nunca logar nome, e-mail,
telefone ou dados de imagem do perfil.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    SENSITIVE_LOG_KEYS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_KEYS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
