"""Serviço dono do perfil de contato único.

Toda mutação monta um candidato, passa pelo schema guard e só é
persistida (e refletida em `current`) quando aceita. Escrita única
lógica: a última gravação aceita vence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.contact_record import (
    DEFAULT_CONTACT_RECORD,
    IMAGE_FIELDS,
    MAX_TAG_LENGTH,
    ContactRecord,
)
from app.domain.sanitizer import FieldKind, sanitize_text
from app.domain.schema_guard import FieldRejection, guard
from app.services.contact_record_merge import changed_fields, merge_extracted_into_record
from app.services.image_encoding import ImageRejectedError, encode_image_file
from app.services.profile_loader import LoadResult, load_or_default

if TYPE_CHECKING:
    from ai.models.card_extraction import ExtractedCardData
    from app.domain.validators import ImageFile
    from app.protocols.profile_store import ProfileSlotStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmitResult:
    """Resultado de uma mutação: record vigente e rejeições (se houver)."""

    accepted: bool
    record: ContactRecord
    rejections: tuple[FieldRejection, ...] = ()

    @property
    def reasons(self) -> list[dict[str, str]]:
        return [{"field": r.field, "message": r.message} for r in self.rejections]


class ProfileService:
    """Carrega, valida e persiste o ContactRecord."""

    def __init__(
        self,
        store: ProfileSlotStoreProtocol,
        slot_key: str,
        default_record: ContactRecord = DEFAULT_CONTACT_RECORD,
    ) -> None:
        self._store = store
        self._slot_key = slot_key
        self._default = default_record
        self._current = default_record

    @property
    def current(self) -> ContactRecord:
        return self._current

    @property
    def slot_key(self) -> str:
        return self._slot_key

    async def load(self) -> LoadResult:
        """Hidrata `current` a partir do slot (uma vez, no startup).

        Raises:
            ProfileStoreUnavailableError: Se o backend não responde.
        """
        raw_text = await self._store.read(self._slot_key)
        result = load_or_default(raw_text, self._default)
        self._current = result.record
        logger.info(
            "profile_loaded",
            extra={
                "component": "profile_service",
                "outcome": result.outcome.value,
                "reason": result.reason.value if result.reason else None,
            },
        )
        return result

    async def submit(self, candidate: Any) -> SubmitResult:
        """Valida o candidato completo e persiste se aceito."""
        result = guard(candidate)
        if not result.accepted or result.record is None:
            return SubmitResult(accepted=False, record=self._current, rejections=result.rejections)

        await self._store.write(self._slot_key, result.record.to_storage_json())
        self._current = result.record
        logger.info(
            "profile_saved",
            extra={"component": "profile_service", "tags_count": len(result.record.tags)},
        )
        return SubmitResult(accepted=True, record=result.record)

    async def merge_scanned(self, extracted: ExtractedCardData) -> SubmitResult:
        """Aplica dados de um cartão escaneado (só campos não-vazios)."""
        candidate = merge_extracted_into_record(self._current, extracted)
        logger.info(
            "profile_merge_scanned",
            extra={
                "component": "profile_service",
                "changed_fields": changed_fields(self._current, candidate),
            },
        )
        return await self.submit(candidate)

    async def add_tag(self, tag: Any) -> SubmitResult:
        """Adiciona tag ao fim; vazia ou duplicada é rejeitada."""
        clean = sanitize_text(tag, FieldKind.TAG, MAX_TAG_LENGTH)
        if not clean:
            return self._reject("tags", "Tag não pode ser vazia")
        if clean in self._current.tags:
            return self._reject("tags", "Tag já existe")
        candidate = self._current.to_storage_dict()
        candidate["tags"] = [*self._current.tags, clean]
        return await self.submit(candidate)

    async def remove_tag(self, tag: str) -> SubmitResult:
        """Remove a tag (comparação exata); ausente é no-op aceito."""
        if tag not in self._current.tags:
            return SubmitResult(accepted=True, record=self._current)
        candidate = self._current.to_storage_dict()
        candidate["tags"] = [item for item in self._current.tags if item != tag]
        return await self.submit(candidate)

    async def set_image(self, field: str, file: ImageFile | None) -> SubmitResult:
        """Define (ou remove, com file=None) profileImage/companyLogo."""
        if field not in IMAGE_FIELDS:
            return self._reject(field, "Campo de imagem desconhecido")
        candidate = self._current.to_storage_dict()
        if file is None:
            candidate.pop(field, None)
        else:
            try:
                candidate[field] = encode_image_file(file)
            except ImageRejectedError as exc:
                return self._reject(field, str(exc))
        return await self.submit(candidate)

    def _reject(self, field: str, message: str) -> SubmitResult:
        return SubmitResult(
            accepted=False,
            record=self._current,
            rejections=(FieldRejection(field, message),),
        )
