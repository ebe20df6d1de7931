"""Testes do loader de configuração YAML dos agentes."""

from __future__ import annotations

import pytest

from ai.config.agent_config import _parse_config, load_agent_config
from ai.prompts.card_scanner_prompt import build_card_scanner_messages


def test_card_scanner_config_loads() -> None:
    config = load_agent_config("card_scanner")
    assert config.agent_name == "card_scanner"
    assert config.model_name == "google/gemini-2.5-flash"
    assert config.fields == ("name", "title", "company", "email", "phone", "website", "address")
    assert "business card" in config.system_prompt


def test_missing_config_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_agent_config("inexistente")


def test_parse_config_requires_mapping() -> None:
    with pytest.raises(ValueError):
        _parse_config(["x"], "x")


def test_parse_config_requires_prompts() -> None:
    with pytest.raises(ValueError, match="prompts"):
        _parse_config({"behavior": {"fields": ["name"]}}, "x")


def test_messages_shape() -> None:
    messages = build_card_scanner_messages("data:image/png;base64,AAAA")
    assert [m["role"] for m in messages] == ["system", "user"]
    user_content = messages[1]["content"]
    assert user_content[0]["type"] == "text"
    assert user_content[0]["text"].endswith(
        "fields: name, title, company, email, phone, website, address"
    )
    assert user_content[1] == {
        "type": "image_url",
        "image_url": {"url": "data:image/png;base64,AAAA"},
    }
