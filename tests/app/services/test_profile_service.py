"""Testes do ProfileService (pipeline + persistência)."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from ai.models.card_extraction import ExtractedCardData
from app.domain.contact_record import DEFAULT_CONTACT_RECORD
from app.domain.validators import ImageFile
from app.infra.stores.profile_store import MemoryProfileSlotStore
from app.services.profile_loader import DefaultReason
from app.services.profile_service import ProfileService
from utils.errors import ProfileStoreUnavailableError

SLOT = "contactData"


def _service(initial: dict[str, str] | None = None) -> tuple[ProfileService, MemoryProfileSlotStore]:
    store = MemoryProfileSlotStore(initial)
    return ProfileService(store, slot_key=SLOT), store


@pytest.mark.asyncio
async def test_load_first_run_uses_default_without_writing() -> None:
    service, store = _service()
    result = await service.load()
    assert result.reason is DefaultReason.EMPTY
    assert service.current is DEFAULT_CONTACT_RECORD
    assert await store.read(SLOT) is None


@pytest.mark.asyncio
async def test_load_corrupted_slot_keeps_slot_untouched() -> None:
    service, store = _service({SLOT: "{quebrado"})
    result = await service.load()
    assert result.reason is DefaultReason.INVALID_JSON
    assert await store.read(SLOT) == "{quebrado"


@pytest.mark.asyncio
async def test_submit_accepted_persists_and_updates_current() -> None:
    service, store = _service()
    result = await service.submit({"name": "Ana", "email": "ana@empresa.com"})
    assert result.accepted is True
    assert service.current.name == "Ana"
    stored = json.loads(await store.read(SLOT) or "{}")
    assert stored["email"] == "ana@empresa.com"


@pytest.mark.asyncio
async def test_submit_rejected_does_not_mutate() -> None:
    service, store = _service()
    result = await service.submit({"name": "Ana", "email": ""})
    assert result.accepted is False
    assert result.record is DEFAULT_CONTACT_RECORD
    assert result.reasons == [{"field": "email", "message": "E-mail é obrigatório"}]
    assert await store.read(SLOT) is None


@pytest.mark.asyncio
async def test_reload_after_submit_returns_saved_record() -> None:
    service, store = _service()
    await service.submit({"name": "Ana", "email": "ana@empresa.com", "tags": ["vip"]})
    reloaded = ProfileService(store, slot_key=SLOT)
    await reloaded.load()
    assert reloaded.current == service.current


@pytest.mark.asyncio
async def test_merge_scanned_overwrites_only_non_empty() -> None:
    service, _ = _service()
    result = await service.merge_scanned(ExtractedCardData(name="Ana", title=""))
    assert result.accepted is True
    assert service.current.name == "Ana"
    assert service.current.title == DEFAULT_CONTACT_RECORD.title
    assert service.current.custom_color == DEFAULT_CONTACT_RECORD.custom_color


@pytest.mark.asyncio
async def test_add_tag_appends_in_order() -> None:
    service, _ = _service()
    await service.add_tag("vendas")
    await service.add_tag("<i>tech</i>")
    assert service.current.tags == ("vendas", "tech")


@pytest.mark.asyncio
@pytest.mark.parametrize("tag", ["", "   ", "<b></b>", None])
async def test_add_blank_tag_is_rejected(tag: object) -> None:
    service, _ = _service()
    result = await service.add_tag(tag)
    assert result.accepted is False
    assert service.current.tags == ()


@pytest.mark.asyncio
async def test_add_duplicate_tag_is_rejected() -> None:
    service, _ = _service()
    await service.add_tag("vendas")
    result = await service.add_tag("vendas")
    assert result.accepted is False
    assert result.reasons[0]["message"] == "Tag já existe"


@pytest.mark.asyncio
async def test_tags_are_case_sensitive() -> None:
    service, _ = _service()
    await service.add_tag("Vendas")
    result = await service.add_tag("vendas")
    assert result.accepted is True
    assert service.current.tags == ("Vendas", "vendas")


@pytest.mark.asyncio
async def test_remove_tag() -> None:
    service, _ = _service()
    await service.add_tag("a")
    await service.add_tag("b")
    await service.remove_tag("a")
    assert service.current.tags == ("b",)


@pytest.mark.asyncio
async def test_remove_missing_tag_is_noop() -> None:
    service, store = _service()
    result = await service.remove_tag("inexistente")
    assert result.accepted is True
    assert await store.read(SLOT) is None


@pytest.mark.asyncio
async def test_set_and_clear_image() -> None:
    service, _ = _service()
    file = ImageFile.from_bytes("foto.png", "image/png", b"\x89PNG")
    result = await service.set_image("profileImage", file)
    assert result.accepted is True
    assert (service.current.profile_image or "").startswith("data:image/png;base64,")

    await service.set_image("profileImage", None)
    assert service.current.profile_image is None


@pytest.mark.asyncio
async def test_set_image_rejects_invalid_file() -> None:
    service, _ = _service()
    file = ImageFile.from_bytes("script.php.png", "image/png", b"x")
    result = await service.set_image("companyLogo", file)
    assert result.accepted is False
    assert result.reasons[0]["field"] == "companyLogo"


@pytest.mark.asyncio
async def test_set_image_unknown_field_is_rejected() -> None:
    service, _ = _service()
    file = ImageFile.from_bytes("foto.png", "image/png", b"x")
    result = await service.set_image("background", file)
    assert result.accepted is False


@pytest.mark.asyncio
async def test_store_failure_propagates_and_keeps_current() -> None:
    store = MemoryProfileSlotStore()
    store.write = AsyncMock(side_effect=ProfileStoreUnavailableError("down"))  # type: ignore[method-assign]
    service = ProfileService(store, slot_key=SLOT)
    with pytest.raises(ProfileStoreUnavailableError):
        await service.submit({"name": "Ana", "email": "ana@empresa.com"})
    assert service.current is DEFAULT_CONTACT_RECORD
