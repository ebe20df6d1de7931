"""ContactRecord - perfil de contato do usuário, persistido em um slot chave-valor.

Modelo imutável: toda mutação passa por Sanitizer -> Validator -> Schema Guard
(ver app/domain/schema_guard.py). Atribuição direta de campo levanta erro.
"""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.sanitizer import FieldKind
from app.domain.validators import validate_email, validate_hex_color, validate_url

Template = Literal["modern", "minimal", "elegant", "bold"]

TEMPLATES: Final[tuple[str, ...]] = ("modern", "minimal", "elegant", "bold")
DEFAULT_TEMPLATE: Final[str] = "modern"

MAX_TAG_LENGTH: Final[int] = 50
MAX_NOTES_LENGTH: Final[int] = 1000
# Data URL de um arquivo de 5MB em base64 (~6.99M) + prefixo.
MAX_IMAGE_DATA_LENGTH: Final[int] = 7_000_100
IMAGE_DATA_PREFIXES: Final[tuple[str, ...]] = (
    "data:image/jpeg;base64,",
    "data:image/png;base64,",
)

# Campo de texto -> (tipo, limite). Chaves no formato persistido.
TEXT_FIELD_RULES: Final[dict[str, tuple[FieldKind, int]]] = {
    "name": (FieldKind.TEXT, 100),
    "title": (FieldKind.TEXT, 100),
    "company": (FieldKind.TEXT, 100),
    "email": (FieldKind.EMAIL, 254),
    "phone": (FieldKind.PHONE, 20),
    "website": (FieldKind.URL, 2000),
    "address": (FieldKind.TEXT, 200),
    "notes": (FieldKind.NOTES, MAX_NOTES_LENGTH),
}

IMAGE_FIELDS: Final[tuple[str, ...]] = ("profileImage", "companyLogo")

# Campos que a extração de cartão pode preencher (nunca template/cor/imagens).
SCANNABLE_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "title",
    "company",
    "email",
    "phone",
    "website",
    "address",
)


class ContactRecord(BaseModel):
    """Perfil de contato canônico."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    title: str = Field(default="", max_length=100)
    company: str = Field(default="", max_length=100)
    email: str = Field(..., min_length=1, max_length=254)
    phone: str = Field(default="", max_length=20, pattern=r"^[0-9+\- ()]*$")
    website: str = Field(default="", max_length=2000)
    address: str = Field(default="", max_length=200)
    profile_image: str | None = Field(default=None, alias="profileImage")
    company_logo: str | None = Field(default=None, alias="companyLogo")
    template: Template = DEFAULT_TEMPLATE
    custom_color: str | None = Field(default=None, alias="customColor")
    tags: tuple[str, ...] = ()
    notes: str = Field(default="", max_length=MAX_NOTES_LENGTH)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        if not validate_email(value):
            raise ValueError("email inválido")
        return value

    @field_validator("website")
    @classmethod
    def validate_website_https(cls, value: str) -> str:
        if value and not validate_url(value):
            raise ValueError("website deve usar HTTPS")
        return value

    @field_validator("custom_color")
    @classmethod
    def validate_color_format(cls, value: str | None) -> str | None:
        if value is not None and not validate_hex_color(value):
            raise ValueError("customColor deve estar no formato #RRGGBB")
        return value

    @field_validator("tags")
    @classmethod
    def validate_unique_tags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("tags não pode conter duplicatas")
        if any(not tag.strip() or len(tag) > MAX_TAG_LENGTH for tag in value):
            raise ValueError("tags não pode conter entradas vazias ou longas")
        return value

    def to_storage_dict(self) -> dict[str, Any]:
        """Converte para o layout persistido (camelCase, sem None)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_storage_json(self) -> str:
        """Serializa para o slot de persistência."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


DEFAULT_CONTACT_RECORD: Final[ContactRecord] = ContactRecord(
    name="Max Mustermann",
    title="Senior Developer",
    company="TechCorp GmbH",
    email="max.mustermann@techcorp.de",
    phone="+49 123 456789",
    website="https://techcorp.de",
    address="Musterstraße 123, 12345 Berlin",
    template="modern",
    custom_color="#a855f7",
    tags=(),
    notes="",
)
