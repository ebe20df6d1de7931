"""
Registros do histórico de uma invocação de scan.

Cada passo guarda quanto tempo a invocação ficou no estado anterior;
AWAITING_MODEL → PARSING é a latência do gateway.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.scan import ScanState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Passo da máquina de scan.

    Attributes:
        from_state: Estado deixado
        to_state: Estado alcançado
        trigger: Gatilho (ex: 'request_sent', 'cancelled')
        elapsed_ms: Tempo em from_state
        metadata: Contexto para auditoria (sem PII, nunca a imagem)
        timestamp: Momento do passo (UTC)
    """

    from_state: ScanState
    to_state: ScanState
    trigger: str
    elapsed_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")
        if self.elapsed_ms < 0:
            raise ValueError("elapsed_ms não pode ser negativo")

    @property
    def is_cancellation(self) -> bool:
        return self.to_state == ScanState.IDLE

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "elapsed_ms": round(self.elapsed_ms, 2),
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Resultado de `ScanStateMachine.transition()`: passo aplicado ou motivo da recusa."""

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
