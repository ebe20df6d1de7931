"""Helpers de normalização para o scanner de cartões.

Converte o dict devolvido pelo modelo em ExtractedCardData: somente
chaves conhecidas, cada valor sanitizado e validado; chave ausente ou
inválida vira "".
"""

from __future__ import annotations

from typing import Any

from ai.models.card_extraction import ExtractedCardData
from app.domain.contact_record import SCANNABLE_FIELDS, TEXT_FIELD_RULES
from app.domain.sanitizer import sanitize_text
from app.domain.validators import validate_email, validate_url


def coerce_scalar(value: Any) -> str:
    """str mantém; número vira str; bool, None, listas e dicts viram ""."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def normalize_email(value: str) -> str:
    return value if validate_email(value) else ""


def normalize_website(value: str) -> str:
    """Aceita só HTTPS; domínio sem esquema ganha "https://"."""
    if not value:
        return ""
    if "://" not in value:
        value = f"https://{value}"
    return value if validate_url(value) else ""


def map_extracted_fields(raw: dict[str, Any]) -> ExtractedCardData:
    """Mapeia o objeto do modelo para ExtractedCardData.

    Args:
        raw: Objeto JSON já extraído da resposta.

    Returns:
        ExtractedCardData com os 7 campos (vazios quando ausentes/inválidos).
    """
    values: dict[str, str] = {}
    for name in SCANNABLE_FIELDS:
        kind, limit = TEXT_FIELD_RULES[name]
        values[name] = sanitize_text(coerce_scalar(raw.get(name)), kind, limit)

    values["email"] = normalize_email(values["email"])
    values["website"] = normalize_website(values["website"])
    return ExtractedCardData(**values)
