"""Sanitização de campos do perfil de contato (texto puro, sem markup).

Responsabilidade:
- Remover tags, atributos, comentários e conteúdo de <script>/<style>
- Aplicar trim e truncamento por caracteres
- Filtrar caracteres fora do alfabeto de telefone

Propriedades garantidas:
- Determinismo (mesma entrada = mesma saída)
- Idempotência: sanitize_text(sanitize_text(x, k, n), k, n) == sanitize_text(x, k, n)
- Nenhuma saída contém "<" ou ">"
- Entrada que não é str vira "" (nunca levanta exceção)
"""

from __future__ import annotations

import re
from enum import StrEnum
from re import Pattern
from typing import Any, Final


class FieldKind(StrEnum):
    """Tipo declarado do campo a sanitizar."""

    TEXT = "text"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    COLOR = "color"
    TAG = "tag"
    NOTES = "notes"
    IMAGE = "image"


DEFAULT_MAX_LENGTH: Final[int] = 1000

# Ordem importa: blocos com conteúdo executável saem antes das tags genéricas.
_SCRIPT_STYLE_BLOCK: Final[Pattern[str]] = re.compile(
    r"<(script|style)\b[^>]*>.*?(?:</\1\s*>|$)",
    re.IGNORECASE | re.DOTALL,
)
_COMMENT: Final[Pattern[str]] = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
_TAG: Final[Pattern[str]] = re.compile(r"</?[A-Za-z!?/][^>]*(?:>|$)")
_ANGLE_BRACKETS: Final[Pattern[str]] = re.compile(r"[<>]")
_NON_PHONE_CHARS: Final[Pattern[str]] = re.compile(r"[^0-9+\- ()]")


def strip_markup(text: str) -> str:
    """Remove markup e qualquer "<"/">" remanescente."""
    result = _SCRIPT_STYLE_BLOCK.sub("", text)
    result = _COMMENT.sub("", result)
    result = _TAG.sub("", result)
    return _ANGLE_BRACKETS.sub("", result)


def sanitize_text(
    raw: Any,
    kind: FieldKind | str = FieldKind.TEXT,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Limpa um valor bruto para o tipo de campo declarado.

    Args:
        raw: Valor vindo do usuário, do storage ou do modelo de visão.
        kind: Tipo do campo (FieldKind). PHONE aplica filtro extra.
        max_length: Limite de caracteres após limpeza.

    Returns:
        Texto puro, sem markup, com trim e truncado.

    Exemplos:
        >>> sanitize_text("<b>Max</b> <script>alert(1)</script>", FieldKind.TEXT, 100)
        'Max'

        >>> sanitize_text("+49 (123) 456-789 ext.9", FieldKind.PHONE, 20)
        '+49 (123) 456-789 9'
    """
    if not isinstance(raw, str) or max_length <= 0:
        return ""

    cleaned = strip_markup(raw).strip()
    if kind == FieldKind.PHONE:
        cleaned = _NON_PHONE_CHARS.sub("", cleaned).strip()

    # Trim após o corte para não deixar espaço final (mantém idempotência).
    return cleaned[:max_length].strip()


def sanitize_phone(raw: Any, max_length: int = 20) -> str:
    """Atalho para sanitize_text com FieldKind.PHONE."""
    return sanitize_text(raw, FieldKind.PHONE, max_length)
