"""Loader seguro do perfil persistido.

Nunca levanta exceção: texto vazio, JSON inválido, valor que não é
objeto ou objeto rejeitado pelo schema guard resultam no record
default, com o motivo explícito no resultado.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import StrEnum

from app.domain.contact_record import ContactRecord
from app.domain.schema_guard import guard
from config.logging import log_fallback

logger = logging.getLogger(__name__)


class LoadOutcome(StrEnum):
    """Resultado do carregamento."""

    OK = "ok"
    USED_DEFAULT = "used_default"


class DefaultReason(StrEnum):
    """Motivo do uso do default."""

    EMPTY = "empty"
    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    SCHEMA_REJECTED = "schema_rejected"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Record carregado e como foi obtido."""

    outcome: LoadOutcome
    record: ContactRecord
    reason: DefaultReason | None = None

    @property
    def used_default(self) -> bool:
        return self.outcome is LoadOutcome.USED_DEFAULT


def load_or_default(raw_text: str | None, default_record: ContactRecord) -> LoadResult:
    """Desserializa e valida o perfil persistido.

    Args:
        raw_text: Conteúdo do slot (None/vazio na primeira execução).
        default_record: Record usado quando o conteúdo não é aceito.

    Returns:
        LoadResult OK com o record validado, ou USED_DEFAULT com motivo.
    """
    if raw_text is None or not raw_text.strip():
        return _use_default(default_record, DefaultReason.EMPTY)

    try:
        candidate = json.loads(raw_text)
    except (ValueError, RecursionError):
        # Aninhamento profundo estoura a pilha do decoder.
        return _use_default(default_record, DefaultReason.INVALID_JSON)

    if not isinstance(candidate, dict):
        return _use_default(default_record, DefaultReason.NOT_AN_OBJECT)

    result = guard(candidate)
    if not result.accepted or result.record is None:
        return _use_default(
            default_record,
            DefaultReason.SCHEMA_REJECTED,
            rejected_fields=result.rejected_fields,
        )

    return LoadResult(outcome=LoadOutcome.OK, record=result.record)


def _use_default(
    default_record: ContactRecord,
    reason: DefaultReason,
    rejected_fields: list[str] | None = None,
) -> LoadResult:
    # Primeira execução não é anomalia.
    if reason is not DefaultReason.EMPTY:
        logger.warning(
            "profile_load_fallback",
            extra={
                "component": "profile_loader",
                "reason": reason.value,
                "rejected_fields": rejected_fields or [],
            },
        )
    log_fallback(logger, "profile_loader", reason=reason.value)
    return LoadResult(outcome=LoadOutcome.USED_DEFAULT, record=default_record, reason=reason)
