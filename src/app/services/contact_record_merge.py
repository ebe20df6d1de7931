"""Merge determinístico de ContactRecord com dados extraídos de um cartão."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.contact_record import SCANNABLE_FIELDS

if TYPE_CHECKING:
    from ai.models.card_extraction import ExtractedCardData
    from app.domain.contact_record import ContactRecord


def merge_extracted_into_record(
    record: ContactRecord,
    extracted: ExtractedCardData,
) -> dict[str, Any]:
    """Monta o candidato resultante do merge (layout persistido).

    Regras:
    - Somente campos extraídos não-vazios sobrescrevem.
    - template, customColor, imagens, tags e notes nunca são tocados.

    O candidato ainda precisa passar pelo schema guard antes de persistir.
    """
    candidate = record.to_storage_dict()
    for field, value in extracted.non_empty_fields().items():
        if field in SCANNABLE_FIELDS:
            candidate[field] = value
    return candidate


def changed_fields(record: ContactRecord, candidate: dict[str, Any]) -> list[str]:
    """Campos escaneáveis cujo valor mudaria com o candidato."""
    current = record.to_storage_dict()
    return [
        field
        for field in SCANNABLE_FIELDS
        if candidate.get(field, "") != current.get(field, "")
    ]
