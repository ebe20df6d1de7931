"""Validadores puros dos campos do perfil de contato.

Cada predicado recebe um valor já sanitizado e retorna bool; nenhum
levanta exceção. `validate_image_file` retorna ImageValidation com o
primeiro motivo de falha.

Observação: a checagem de nome de arquivo é defesa em profundidade fraca.
Nome e content-type são informados pelo cliente e podem ser forjados;
não substitui inspeção do conteúdo.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Any, Final

from pydantic import HttpUrl, TypeAdapter, ValidationError

MAX_EMAIL_LENGTH: Final[int] = 254
MAX_URL_LENGTH: Final[int] = 2000
MAX_IMAGE_BYTES: Final[int] = 5 * 1024 * 1024
ALLOWED_IMAGE_TYPES: Final[frozenset[str]] = frozenset({"image/jpeg", "image/png"})
SUSPICIOUS_NAME_PATTERNS: Final[tuple[str, ...]] = (".exe", ".js", ".html", ".php", ".asp")

_EMAIL_REGEX: Final[Pattern[str]] = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_HEX_COLOR_REGEX: Final[Pattern[str]] = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)
_URL_ADAPTER: Final[TypeAdapter[HttpUrl]] = TypeAdapter(HttpUrl)


def validate_email(value: Any) -> bool:
    """Valida formato local@dominio.tld (TLD >= 2 letras) e tamanho <= 254."""
    if not isinstance(value, str):
        return False
    return len(value) <= MAX_EMAIL_LENGTH and _EMAIL_REGEX.fullmatch(value) is not None


def validate_url(value: Any) -> bool:
    """Valida URL absoluta com host, esquema https e tamanho <= 2000.

    Qualquer falha de parse resulta em False.
    """
    if not isinstance(value, str) or not value or len(value) > MAX_URL_LENGTH:
        return False
    if value != value.strip():
        return False
    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return parsed.scheme == "https" and bool(parsed.host)


def validate_hex_color(value: Any) -> bool:
    """Valida cor no formato #RRGGBB (case-insensitive).

    String vazia NÃO é válida aqui; use is_color_unset para distinguir
    "não definida" de "inválida".
    """
    if not isinstance(value, str):
        return False
    return _HEX_COLOR_REGEX.fullmatch(value) is not None


def is_color_unset(value: Any) -> bool:
    """Retorna True quando a cor não foi definida (None ou string vazia)."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def validate_text_length(value: Any, max_length: int) -> bool:
    """Valida que o valor é str com no máximo max_length caracteres."""
    return isinstance(value, str) and len(value) <= max_length


@dataclass(frozen=True, slots=True)
class ImageFile:
    """Arquivo de imagem enviado pelo cliente (nome e tipo são declarados)."""

    name: str
    content_type: str
    size: int
    data: bytes = b""

    @classmethod
    def from_bytes(cls, name: str, content_type: str, data: bytes) -> ImageFile:
        return cls(name=name, content_type=content_type, size=len(data), data=data)

    @property
    def media_type(self) -> str:
        """Content-type normalizado (sem parâmetros, minúsculo)."""
        return self.content_type.split(";", 1)[0].strip().lower()


@dataclass(frozen=True, slots=True)
class ImageValidation:
    """Resultado da validação de imagem."""

    ok: bool
    reason: str | None = None


IMAGE_TOO_LARGE: Final[str] = "Arquivo deve ter no máximo 5MB"
IMAGE_TYPE_NOT_ALLOWED: Final[str] = "Apenas arquivos JPEG e PNG são permitidos"
IMAGE_NAME_SUSPICIOUS: Final[str] = "Tipo de arquivo inválido detectado"


def validate_image_file(file: ImageFile) -> ImageValidation:
    """Valida tamanho, media type declarado e nome do arquivo.

    Retorna o primeiro motivo de falha, na ordem: tamanho, tipo, nome.
    """
    if file.size > MAX_IMAGE_BYTES:
        return ImageValidation(ok=False, reason=IMAGE_TOO_LARGE)
    if file.media_type not in ALLOWED_IMAGE_TYPES:
        return ImageValidation(ok=False, reason=IMAGE_TYPE_NOT_ALLOWED)
    file_name = file.name.lower()
    if any(pattern in file_name for pattern in SUSPICIOUS_NAME_PATTERNS):
        return ImageValidation(ok=False, reason=IMAGE_NAME_SUSPICIOUS)
    return ImageValidation(ok=True)
