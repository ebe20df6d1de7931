"""Testes das settings (base, gateway de visão e storage)."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_GATEWAY_URL,
    DEFAULT_PROFILE_SLOT_KEY,
    BaseSettings,
    StorageSettings,
    VisionGatewaySettings,
    get_base_settings,
    get_storage_settings,
    get_vision_gateway_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_vision_gateway_settings.cache_clear()
    get_storage_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_vision_gateway_settings.cache_clear()
    get_storage_settings.cache_clear()


class TestBaseSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "SERVICE_NAME", "DEBUG", "LOG_LEVEL", "CORS_ALLOWED_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = get_base_settings()
        assert settings.environment == "development"
        assert settings.service_name == "cartao_visita"
        assert settings.strict_validation is False
        assert settings.cors_origins == ("*",)
        assert settings.validate() == []

    @pytest.mark.parametrize(("raw", "expected"), [("prod", "production"), ("stage", "staging")])
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_invalid_log_level_reported(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]

    def test_cors_origins_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
        assert get_base_settings().cors_origins == ("https://a.example", "https://b.example")

    def test_wildcard_cors_rejected_in_production(self) -> None:
        settings = BaseSettings(environment="production")
        assert settings.strict_validation is True
        assert settings.validate() == ["CORS_ALLOWED_ORIGINS não pode ser '*' em produção"]


class TestVisionGatewaySettings:
    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_GATEWAY_API_KEY", "secret")
        monkeypatch.setenv("AI_GATEWAY_TIMEOUT_SECONDS", "12.5")
        monkeypatch.delenv("AI_GATEWAY_URL", raising=False)
        monkeypatch.delenv("CARD_SCANNER_ENABLED", raising=False)

        settings = get_vision_gateway_settings()

        assert settings.url == DEFAULT_GATEWAY_URL
        assert settings.timeout_seconds == 12.5
        assert settings.is_configured is True
        assert settings.validate() == []

    def test_missing_key_is_not_configured(self) -> None:
        settings = VisionGatewaySettings()
        assert settings.is_configured is False
        assert any("AI_GATEWAY_API_KEY" in e for e in settings.validate())

    def test_disabled_scanner_skips_key_check(self) -> None:
        settings = VisionGatewaySettings(enabled=False)
        assert settings.is_configured is False
        assert settings.validate() == []

    def test_invalid_timeout_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_GATEWAY_API_KEY", "secret")
        monkeypatch.setenv("AI_GATEWAY_TIMEOUT_SECONDS", "rápido")
        errors = get_vision_gateway_settings().validate()
        assert "AI_GATEWAY_TIMEOUT_SECONDS deve ser > 0" in errors

    def test_http_url_rejected(self) -> None:
        settings = VisionGatewaySettings(url="http://gateway.local", api_key="x")
        assert settings.validate() == ["AI_GATEWAY_URL deve usar https"]


class TestStorageSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("PROFILE_STORE_BACKEND", "REDIS_URL", "PROFILE_SLOT_KEY"):
            monkeypatch.delenv(name, raising=False)
        settings = get_storage_settings()
        assert settings.backend == "memory"
        assert settings.slot_key == DEFAULT_PROFILE_SLOT_KEY == "contactData"
        assert settings.validate() == []

    def test_redis_requires_url(self) -> None:
        errors = StorageSettings(backend="redis").validate()
        assert errors == ["REDIS_URL obrigatório quando PROFILE_STORE_BACKEND=redis"]

    def test_memory_rejected_outside_development(self) -> None:
        errors = StorageSettings().validate(is_production=True)
        assert len(errors) == 1
        assert "memory" in errors[0]

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROFILE_STORE_BACKEND", "postgres")
        assert get_storage_settings().backend == "memory"
