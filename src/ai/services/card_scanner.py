"""Serviço do scanner de cartão de visita.

Orquestra uma invocação: imagem → gateway de visão → texto bruto →
extração de JSON → mapeamento de campos. Cada chamada de scan() usa
uma ScanStateMachine nova; nenhuma falha escapa como exceção, exceto
cancelamento (que devolve a máquina a IDLE e é propagado).
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ai.config.agent_config import AgentConfig, load_agent_config
from ai.models.card_extraction import ScanErrorKind, ScanResult
from ai.prompts.card_scanner_prompt import CARD_SCANNER_AGENT, build_card_scanner_messages
from ai.utils._json_extractor import extract_json_object
from ai.utils.card_extraction import map_extracted_fields
from fsm.manager.machine import ScanStateMachine, create_scan_fsm
from fsm.states.scan import ScanState
from utils.errors import (
    GatewayNotConfiguredError,
    QuotaExhaustedError,
    RateLimitedError,
    UpstreamStatusError,
    UpstreamTransportError,
)

if TYPE_CHECKING:
    from ai.core.card_scanner_client import VisionClientProtocol

logger = logging.getLogger(__name__)


class CardScannerService:
    """Extrai dados de contato de imagens de cartões de visita."""

    def __init__(
        self,
        client: VisionClientProtocol,
        *,
        model: str | None = None,
        config: AgentConfig | None = None,
        machine_factory: Callable[[str], ScanStateMachine] = create_scan_fsm,
    ) -> None:
        self._client = client
        self._config = config or load_agent_config(CARD_SCANNER_AGENT)
        self._model = model or self._config.model_name
        self._machine_factory = machine_factory

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return self._client.is_configured

    async def scan(self, image_data: Any) -> ScanResult:
        """Executa uma invocação completa do scanner.

        Args:
            image_data: Imagem codificada (data URL).

        Returns:
            ScanResult com ExtractedCardData ou falha classificada.

        Raises:
            asyncio.CancelledError: Propagado após voltar a máquina a IDLE.
        """
        scan_id = uuid.uuid4().hex[:12]
        machine = self._machine_factory(scan_id)

        try:
            return await self._run(machine, image_data)
        except asyncio.CancelledError:
            machine.cancel()
            logger.info(
                "card_scan_cancelled",
                extra={"component": "card_scanner", "scan_id": scan_id},
            )
            raise
        except Exception:
            logger.exception(
                "card_scan_unexpected_error",
                extra={"component": "card_scanner", "scan_id": scan_id},
            )
            return _fail(machine, ScanErrorKind.UNEXPECTED)

    async def _run(self, machine: ScanStateMachine, image_data: Any) -> ScanResult:
        if not isinstance(image_data, str) or not image_data.strip():
            return _fail(machine, ScanErrorKind.INVALID_INPUT)
        if not self._client.is_configured:
            return _fail(machine, ScanErrorKind.NOT_CONFIGURED)

        machine.advance(ScanState.UPLOADING, "image_received")
        messages = build_card_scanner_messages(image_data.strip(), self._config)

        machine.advance(ScanState.AWAITING_MODEL, "request_sent")
        try:
            content = await self._client.complete(model=self._model, messages=messages)
        except RateLimitedError:
            return _fail(machine, ScanErrorKind.RATE_LIMITED)
        except QuotaExhaustedError:
            return _fail(machine, ScanErrorKind.QUOTA_EXHAUSTED)
        except UpstreamStatusError as exc:
            return _fail(machine, ScanErrorKind.UPSTREAM_ERROR, str(exc), status_code=exc.status_code)
        except UpstreamTransportError:
            return _fail(machine, ScanErrorKind.UPSTREAM_ERROR)
        except GatewayNotConfiguredError:
            return _fail(machine, ScanErrorKind.NOT_CONFIGURED)

        machine.advance(ScanState.PARSING, "response_received")
        extraction = extract_json_object(content)
        if not extraction.ok:
            return _fail(machine, ScanErrorKind.PARSE_FAILED, reason=extraction.reason)

        data = map_extracted_fields(extraction.data)
        machine.advance(ScanState.SUCCEEDED, "parsed")
        logger.info(
            "card_scan_succeeded",
            extra={
                "component": "card_scanner",
                "scan_id": machine.scan_id,
                "strategy": extraction.strategy,
                "fields_count": len(data.non_empty_fields()),
                "elapsed_ms": round(machine.elapsed_ms, 2),
            },
        )
        return ScanResult.ok(data)


def _fail(
    machine: ScanStateMachine,
    kind: ScanErrorKind,
    message: str | None = None,
    **log_extra: Any,
) -> ScanResult:
    machine.transition(ScanState.FAILED, kind.value)
    logger.warning(
        "card_scan_failed",
        extra={
            "component": "card_scanner",
            "scan_id": machine.scan_id,
            "error_kind": kind.value,
            "elapsed_ms": round(machine.elapsed_ms, 2),
            **log_extra,
        },
    )
    return ScanResult.failed(kind, message)
