"""Testes do merge de dados escaneados no ContactRecord."""

from __future__ import annotations

from ai.models.card_extraction import ExtractedCardData
from app.domain.contact_record import DEFAULT_CONTACT_RECORD
from app.services.contact_record_merge import changed_fields, merge_extracted_into_record


def test_only_non_empty_fields_overwrite() -> None:
    extracted = ExtractedCardData(name="Ana Souza", company="", email="ana@empresa.com")
    candidate = merge_extracted_into_record(DEFAULT_CONTACT_RECORD, extracted)
    assert candidate["name"] == "Ana Souza"
    assert candidate["email"] == "ana@empresa.com"
    assert candidate["company"] == DEFAULT_CONTACT_RECORD.company


def test_presentation_fields_are_never_touched() -> None:
    candidate = merge_extracted_into_record(
        DEFAULT_CONTACT_RECORD,
        ExtractedCardData(name="Ana"),
    )
    assert candidate["template"] == DEFAULT_CONTACT_RECORD.template
    assert candidate["customColor"] == DEFAULT_CONTACT_RECORD.custom_color
    assert candidate["tags"] == list(DEFAULT_CONTACT_RECORD.tags)


def test_empty_extraction_changes_nothing() -> None:
    candidate = merge_extracted_into_record(DEFAULT_CONTACT_RECORD, ExtractedCardData())
    assert candidate == DEFAULT_CONTACT_RECORD.to_storage_dict()
    assert changed_fields(DEFAULT_CONTACT_RECORD, candidate) == []


def test_changed_fields_lists_overwritten_fields() -> None:
    candidate = merge_extracted_into_record(
        DEFAULT_CONTACT_RECORD,
        ExtractedCardData(title="CTO", phone="+55 11 99999-0000"),
    )
    assert changed_fields(DEFAULT_CONTACT_RECORD, candidate) == ["title", "phone"]
