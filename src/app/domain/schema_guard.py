"""Schema Guard - portão tudo-ou-nada para objetos ContactRecord candidatos.

Aplica a tabela de campos a cada chave do candidato:
- chaves desconhecidas são descartadas
- strings passam pelo sanitizer com o limite do campo
- template desconhecido vira o default; tags são deduplicadas
- imagens fora do formato data URL jpeg/png são descartadas

Rejeita o candidato inteiro (sem aceitação parcial) quando:
- name ou email vazios
- email malformado
- website não-vazio e não-HTTPS
- customColor não-vazio e malformado
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from app.domain.contact_record import (
    DEFAULT_TEMPLATE,
    IMAGE_DATA_PREFIXES,
    IMAGE_FIELDS,
    MAX_IMAGE_DATA_LENGTH,
    MAX_TAG_LENGTH,
    TEMPLATES,
    TEXT_FIELD_RULES,
    ContactRecord,
)
from app.domain.sanitizer import FieldKind, sanitize_text
from app.domain.validators import (
    is_color_unset,
    validate_email,
    validate_hex_color,
    validate_url,
)

logger = logging.getLogger(__name__)

# Aceita chaves em snake_case vindas de chamadores Python.
_SNAKE_CASE_ALIASES = {
    "profileImage": "profile_image",
    "companyLogo": "company_logo",
    "customColor": "custom_color",
}

# Cor maior que isso nunca é válida; o limite evita truncar lixo em algo válido.
_MAX_COLOR_INPUT = 64


@dataclass(frozen=True, slots=True)
class FieldRejection:
    """Motivo de rejeição de um campo (mensagem exibível ao usuário)."""

    field: str
    message: str


@dataclass(frozen=True, slots=True)
class GuardResult:
    """Resultado do guard: record aceito OU lista de rejeições."""

    accepted: bool
    record: ContactRecord | None = None
    rejections: tuple[FieldRejection, ...] = ()

    def __post_init__(self) -> None:
        if self.accepted and self.record is None:
            raise ValueError("GuardResult aceito deve incluir record")
        if not self.accepted and not self.rejections:
            raise ValueError("GuardResult rejeitado deve incluir rejections")

    @classmethod
    def ok(cls, record: ContactRecord) -> GuardResult:
        return cls(accepted=True, record=record)

    @classmethod
    def rejected(cls, *rejections: FieldRejection) -> GuardResult:
        return cls(accepted=False, rejections=tuple(rejections))

    @property
    def rejected_fields(self) -> list[str]:
        return [item.field for item in self.rejections]

    @property
    def reason(self) -> str | None:
        """Mensagem única concatenada (None se aceito)."""
        if self.accepted:
            return None
        return "; ".join(f"{item.field}: {item.message}" for item in self.rejections)


def guard(candidate: Any) -> GuardResult:
    """Valida e normaliza um candidato a ContactRecord.

    Args:
        candidate: Mapping com chaves no layout persistido (camelCase)
            ou snake_case. Qualquer outro tipo é rejeitado.

    Returns:
        GuardResult com o record normalizado ou as rejeições.
    """
    if not isinstance(candidate, Mapping):
        return GuardResult.rejected(
            FieldRejection("record", "Dados do perfil devem ser um objeto")
        )

    clean: dict[str, Any] = {
        name: sanitize_text(_lookup(candidate, name), kind, limit)
        for name, (kind, limit) in TEXT_FIELD_RULES.items()
    }
    clean["template"] = _coerce_template(_lookup(candidate, "template"))
    clean["tags"] = _coerce_tags(_lookup(candidate, "tags"))
    for image_field in IMAGE_FIELDS:
        clean[image_field] = _coerce_image(_lookup(candidate, image_field))

    raw_color = _lookup(candidate, "customColor")
    clean["customColor"] = (
        None
        if is_color_unset(raw_color)
        else sanitize_text(raw_color, FieldKind.COLOR, _MAX_COLOR_INPUT)
    )

    rejections = _check_invariants(clean, raw_color)
    if rejections:
        logger.info(
            "contact_record_rejected",
            extra={"component": "schema_guard", "rejected_fields": [r.field for r in rejections]},
        )
        return GuardResult.rejected(*rejections)

    try:
        record = ContactRecord.model_validate(clean)
    except ValidationError as exc:
        return GuardResult.rejected(*_rejections_from_validation(exc))
    return GuardResult.ok(record)


def _lookup(candidate: Mapping[str, Any], name: str) -> Any:
    if name in candidate:
        return candidate[name]
    alias = _SNAKE_CASE_ALIASES.get(name)
    return candidate.get(alias) if alias else None


def _check_invariants(clean: dict[str, Any], raw_color: Any) -> list[FieldRejection]:
    rejections: list[FieldRejection] = []
    if not clean["name"]:
        rejections.append(FieldRejection("name", "Nome é obrigatório"))
    if not clean["email"]:
        rejections.append(FieldRejection("email", "E-mail é obrigatório"))
    elif not validate_email(clean["email"]):
        rejections.append(FieldRejection("email", "E-mail inválido"))
    if clean["website"] and not validate_url(clean["website"]):
        rejections.append(FieldRejection("website", "Website deve usar HTTPS"))
    if not is_color_unset(raw_color) and not validate_hex_color(clean["customColor"]):
        rejections.append(FieldRejection("customColor", "Cor deve estar no formato #RRGGBB"))
    return rejections


def _coerce_template(value: Any) -> str:
    return value if isinstance(value, str) and value in TEMPLATES else DEFAULT_TEMPLATE


def _coerce_tags(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    tags: list[str] = []
    seen: set[str] = set()
    for item in value:
        tag = sanitize_text(item, FieldKind.TAG, MAX_TAG_LENGTH)
        if not tag or tag in seen:
            continue
        seen.add(tag)
        tags.append(tag)
    return tags


def _coerce_image(value: Any) -> str | None:
    if not isinstance(value, str) or not value:
        return None
    image = sanitize_text(value, FieldKind.IMAGE, MAX_IMAGE_DATA_LENGTH)
    if not image.startswith(IMAGE_DATA_PREFIXES):
        logger.info("contact_record_image_dropped", extra={"component": "schema_guard"})
        return None
    return image


def _rejections_from_validation(exc: ValidationError) -> list[FieldRejection]:
    rejections: list[FieldRejection] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "record"
        rejections.append(FieldRejection(location, str(error.get("msg", "inválido"))))
    return rejections or [FieldRejection("record", "Dados do perfil inválidos")]
