"""Formatter JSON com os campos obrigatórios do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON.

    Exemplo de output:
        {"asctime": "2026-10-17 10:30:00,123", "level": "WARNING",
         "logger": "app.services.profile_loader", "message": "profile_load_fallback",
         "correlation_id": "abc-123", "service": "cartao_visita", "reason": "invalid_json"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
