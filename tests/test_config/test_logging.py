"""Testes de config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "evento", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.services.profile_loader",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
        assert any(isinstance(f, SensitiveFieldFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "cartao_visita"


class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        logger = get_logger("app.services.sharing")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("app.services.sharing")


class TestLogFallback:
    def test_basic_fields(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "profile_loader")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "profile_loader")
        assert call_args[1]["extra"] == {"fallback_used": True, "component": "profile_loader"}

    def test_optional_fields(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "profile_loader", reason="invalid_json", elapsed_ms=1.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "invalid_json"
        assert extra["elapsed_ms"] == 1.5


class TestCorrelationIdFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "corr-1").filter(record) is True
        assert record.correlation_id == "corr-1"
        assert record.service == "svc"

    def test_without_getter_uses_empty(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""

    def test_explicit_correlation_id_wins(self) -> None:
        record = _record(correlation_id="explicit")
        CorrelationIdFilter("svc", lambda: "ctx").filter(record)
        assert record.correlation_id == "explicit"


class TestJsonFormatter:
    def test_output_has_required_fields_renamed(self) -> None:
        record = _record("profile_load_fallback", reason="invalid_json")
        CorrelationIdFilter("cartao_visita", lambda: "abc-123").filter(record)

        payload = json.loads(create_json_formatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "app.services.profile_loader"
        assert payload["message"] == "profile_load_fallback"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "cartao_visita"
        assert payload["reason"] == "invalid_json"
        assert "levelname" not in payload

    def test_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}


class TestSensitiveFieldFilter:
    def test_profile_fields_are_redacted(self) -> None:
        record = _record(email="ana@empresa.com", imageData="data:image/png;base64,AAAA", reason="x")
        assert SensitiveFieldFilter().filter(record) is True
        assert record.email == "[redacted]"
        assert record.imageData == "[redacted]"
        assert record.reason == "x"

    def test_logger_name_untouched(self) -> None:
        record = _record()
        SensitiveFieldFilter().filter(record)
        assert record.name == "app.services.profile_loader"
