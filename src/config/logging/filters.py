"""Filter que injeta correlation_id e service em cada LogRecord."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece registros com correlation_id e service (nunca filtra).

    Args:
        service_name: Nome do serviço.
        correlation_id_getter: Função que retorna o correlation_id atual;
            sem ela, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


# Campos de perfil/imagem que nunca saem nos logs, mesmo via `extra`.
# `name` fica de fora: é o nome do logger no LogRecord.
SENSITIVE_LOG_KEYS: frozenset[str] = frozenset(
    {
        "email",
        "phone",
        "address",
        "notes",
        "image_data",
        "imageData",
        "profileImage",
        "companyLogo",
    }
)

REDACTED = "[redacted]"


class SensitiveFieldFilter(logging.Filter):
    """Substitui valores de campos de perfil passados via `extra`."""

    def __init__(self, keys: frozenset[str] = SENSITIVE_LOG_KEYS) -> None:
        super().__init__()
        self._keys = keys

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self._keys.intersection(record.__dict__):
            record.__dict__[key] = REDACTED
        return True
