"""Testes do sanitizer de campos do perfil."""

from __future__ import annotations

import pytest

from app.domain.sanitizer import FieldKind, sanitize_phone, sanitize_text, strip_markup

SAMPLES = [
    "Max Mustermann",
    "  espaços nas pontas  ",
    "<b>Max</b> <script>alert(1)</script>",
    "<img src=x onerror=alert(1)>Max",
    "a < b > c",
    "x<!-- comentário -->z",
    "<style>body{}</style>texto",
    "<<script>script>alert(1)<</script>/script>",
    "abc def",
    "+49 (123) 456-789 ext.9",
    "",
]


class TestSanitizeText:
    def test_removes_tags_and_script_content(self) -> None:
        assert sanitize_text("<b>Max</b> <script>alert(1)</script>", FieldKind.TEXT, 100) == "Max"

    def test_removes_attributes_with_tag(self) -> None:
        assert sanitize_text("<img src=x onerror=alert(1)>Max", FieldKind.TEXT, 100) == "Max"

    def test_removes_comments(self) -> None:
        assert sanitize_text("x<!-- y -->z") == "xz"

    def test_unclosed_script_is_dropped(self) -> None:
        assert sanitize_text("<script>alert(1)", FieldKind.TEXT, 100) == ""

    def test_stray_angle_brackets_removed(self) -> None:
        result = sanitize_text("a < b > c")
        assert "<" not in result
        assert ">" not in result
        assert result.startswith("a")
        assert result.endswith("c")

    def test_trims_whitespace(self) -> None:
        assert sanitize_text("  hello  ") == "hello"

    def test_truncates_by_characters(self) -> None:
        assert sanitize_text("a" * 150, FieldKind.TEXT, 100) == "a" * 100

    def test_truncation_does_not_leave_trailing_space(self) -> None:
        assert sanitize_text("abc def", FieldKind.TEXT, 4) == "abc"

    def test_unicode_is_preserved(self) -> None:
        assert sanitize_text("Musterstraße 123, São Paulo") == "Musterstraße 123, São Paulo"

    @pytest.mark.parametrize("raw", [None, 42, 3.5, ["a"], {"a": 1}, b"bytes"])
    def test_non_string_input_returns_empty(self, raw: object) -> None:
        assert sanitize_text(raw) == ""

    def test_non_positive_limit_returns_empty(self) -> None:
        assert sanitize_text("Max", FieldKind.TEXT, 0) == ""

    @pytest.mark.parametrize("raw", SAMPLES)
    @pytest.mark.parametrize("kind", [FieldKind.TEXT, FieldKind.PHONE, FieldKind.NOTES])
    def test_idempotent(self, raw: str, kind: FieldKind) -> None:
        once = sanitize_text(raw, kind, 20)
        assert sanitize_text(once, kind, 20) == once

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_output_never_contains_angle_brackets(self, raw: str) -> None:
        result = sanitize_text(raw, FieldKind.TEXT, 1000)
        assert "<" not in result
        assert ">" not in result


class TestPhone:
    def test_phone_filters_disallowed_characters(self) -> None:
        assert sanitize_text("+49 (123) 456-789 ext.9", FieldKind.PHONE, 20) == "+49 (123) 456-789 9"

    def test_phone_letters_only_becomes_empty(self) -> None:
        assert sanitize_phone("call me") == ""

    def test_sanitize_phone_applies_limit(self) -> None:
        assert len(sanitize_phone("1" * 40)) == 20


def test_strip_markup_keeps_plain_text() -> None:
    assert strip_markup("sem markup") == "sem markup"
