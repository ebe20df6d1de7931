"""Testes do schema guard (tudo-ou-nada) do ContactRecord."""

from __future__ import annotations

from typing import Any

import pytest

from app.domain.contact_record import DEFAULT_CONTACT_RECORD
from app.domain.schema_guard import FieldRejection, GuardResult, guard


def _candidate(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {"name": "Max Mustermann", "email": "max@techcorp.de"}
    base.update(overrides)
    return base


class TestAccepted:
    def test_minimal_candidate_gets_defaults(self) -> None:
        result = guard(_candidate())
        assert result.accepted is True
        assert result.record is not None
        assert result.record.template == "modern"
        assert result.record.tags == ()
        assert result.record.custom_color is None
        assert result.record.website == ""

    def test_default_record_round_trips(self) -> None:
        result = guard(DEFAULT_CONTACT_RECORD.to_storage_dict())
        assert result.accepted is True
        assert result.record == DEFAULT_CONTACT_RECORD

    def test_markup_is_stripped_from_every_text_field(self) -> None:
        result = guard(
            _candidate(
                name="<img src=x onerror=alert(1)>Max",
                company="<b>TechCorp</b>",
                notes="<script>steal()</script>Nota",
            )
        )
        assert result.record is not None
        assert result.record.name == "Max"
        assert result.record.company == "TechCorp"
        assert result.record.notes == "Nota"

    def test_long_name_is_truncated(self) -> None:
        result = guard(_candidate(name="N" * 150))
        assert result.record is not None
        assert len(result.record.name) == 100

    def test_phone_is_filtered(self) -> None:
        result = guard(_candidate(phone="+49 123 abc 456"))
        assert result.record is not None
        assert result.record.phone == "+49 123  456"

    def test_unknown_template_defaults(self) -> None:
        result = guard(_candidate(template="fancy"))
        assert result.record is not None
        assert result.record.template == "modern"

    def test_known_template_is_kept(self) -> None:
        result = guard(_candidate(template="bold"))
        assert result.record is not None
        assert result.record.template == "bold"

    def test_tags_are_deduplicated_and_blank_dropped(self) -> None:
        result = guard(_candidate(tags=["vendas", "vendas", "  ", "<b></b>", "tech"]))
        assert result.record is not None
        assert result.record.tags == ("vendas", "tech")

    def test_tags_with_wrong_type_become_empty(self) -> None:
        result = guard(_candidate(tags="vendas"))
        assert result.record is not None
        assert result.record.tags == ()

    def test_unknown_keys_are_dropped(self) -> None:
        result = guard(_candidate(isAdmin=True, __proto__={"x": 1}))
        assert result.accepted is True
        assert result.record is not None
        assert "isAdmin" not in result.record.to_storage_dict()

    def test_empty_color_means_unset(self) -> None:
        result = guard(_candidate(customColor=""))
        assert result.record is not None
        assert result.record.custom_color is None

    def test_snake_case_keys_are_accepted(self) -> None:
        result = guard(_candidate(custom_color="#A855F7"))
        assert result.record is not None
        assert result.record.custom_color == "#A855F7"

    def test_non_data_url_image_is_dropped(self) -> None:
        result = guard(_candidate(profileImage="javascript:alert(1)"))
        assert result.record is not None
        assert result.record.profile_image is None

    def test_data_url_image_is_kept(self) -> None:
        image = "data:image/png;base64,iVBORw0KGgo="
        result = guard(_candidate(companyLogo=image))
        assert result.record is not None
        assert result.record.company_logo == image


class TestRejected:
    def test_missing_email_is_rejected(self) -> None:
        result = guard({"name": "Max"})
        assert result.accepted is False
        assert result.record is None
        assert "email" in result.rejected_fields

    def test_markup_only_name_is_rejected(self) -> None:
        result = guard(_candidate(name="<b></b>"))
        assert result.rejected_fields == ["name"]

    def test_malformed_email_is_rejected(self) -> None:
        result = guard(_candidate(email="max@techcorp"))
        assert result.rejected_fields == ["email"]

    def test_http_website_is_rejected(self) -> None:
        result = guard(_candidate(website="http://techcorp.de"))
        assert result.rejected_fields == ["website"]

    @pytest.mark.parametrize("color", ["red", "#a855f", "#a855f7ff"])
    def test_invalid_color_is_rejected(self, color: str) -> None:
        result = guard(_candidate(customColor=color))
        assert result.rejected_fields == ["customColor"]

    def test_all_failures_are_reported_together(self) -> None:
        result = guard({"name": "", "email": "x", "website": "http://a.de"})
        assert set(result.rejected_fields) == {"name", "email", "website"}
        assert result.reason is not None
        assert "website" in result.reason

    @pytest.mark.parametrize("candidate", [None, [], "texto", 42])
    def test_non_mapping_is_rejected(self, candidate: object) -> None:
        result = guard(candidate)
        assert result.accepted is False
        assert result.rejected_fields == ["record"]


class TestGuardResult:
    def test_accepted_requires_record(self) -> None:
        with pytest.raises(ValueError):
            GuardResult(accepted=True)

    def test_rejected_requires_reasons(self) -> None:
        with pytest.raises(ValueError):
            GuardResult(accepted=False)

    def test_reason_is_none_when_accepted(self) -> None:
        assert GuardResult.ok(DEFAULT_CONTACT_RECORD).reason is None

    def test_rejected_builder(self) -> None:
        result = GuardResult.rejected(FieldRejection("name", "Nome é obrigatório"))
        assert result.reason == "name: Nome é obrigatório"
