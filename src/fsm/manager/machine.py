"""
Máquina de estados (ScanStateMachine) de uma invocação de scan.

Uma instância por imagem: controla transições, mantém histórico
rastreável e trata cancelamento.
"""

import logging
import time
from typing import Any

from fsm.states.scan import (
    DEFAULT_INITIAL_STATE,
    IN_FLIGHT_STATES,
    ScanState,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult

logger = logging.getLogger(__name__)


class ScanStateMachine:
    """
    Máquina de estados de um scan.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_entered_at", "_history", "_scan_id", "_started_at")

    def __init__(self, scan_id: str = "") -> None:
        """
        Inicializa a máquina em IDLE.

        Args:
            scan_id: Identificador da invocação para logs
        """
        self._current_state = DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._scan_id = scan_id
        self._started_at = time.monotonic()
        self._entered_at = self._started_at

    @property
    def current_state(self) -> ScanState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def scan_id(self) -> str:
        return self._scan_id

    @property
    def elapsed_ms(self) -> float:
        """Tempo desde a criação da máquina."""
        return (time.monotonic() - self._started_at) * 1000

    @property
    def is_terminal(self) -> bool:
        """Verifica se está em estado terminal."""
        return is_terminal(self._current_state)

    def get_valid_targets(self) -> frozenset[ScanState]:
        """Retorna estados de destino válidos a partir do estado atual."""
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: ScanState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho (ex: 'request_sent', 'parse_failed')
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        now = time.monotonic()
        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            elapsed_ms=(now - self._entered_at) * 1000,
            metadata=metadata or {},
        )
        self._current_state = target
        self._entered_at = now
        self._history.append(transition)

        logger.debug(
            "scan_state_transition",
            extra={"scan_id": self._scan_id, **transition.to_log_dict()},
        )
        return TransitionResult(success=True, transition=transition)

    def advance(
        self,
        target: ScanState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> StateTransition:
        """
        Transita ou levanta erro; para uso interno do scanner.

        Raises:
            RuntimeError: Se a transição não é permitida pelo grafo.
        """
        result = self.transition(target, trigger, metadata)
        if not result.success or result.transition is None:
            raise RuntimeError(result.error_reason)
        return result.transition

    def cancel(self) -> bool:
        """
        Volta para IDLE se houver trabalho em andamento.

        Returns:
            True se a máquina estava em voo e voltou para IDLE.
        """
        if self._current_state not in IN_FLIGHT_STATES:
            return False
        return self.transition(ScanState.IDLE, "cancelled").success

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "scan_id": self._scan_id,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "elapsed_ms": round(self.elapsed_ms, 2),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Retorna histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]


def create_scan_fsm(scan_id: str = "") -> ScanStateMachine:
    """
    Factory function para criar uma máquina nova (sempre em IDLE).

    Args:
        scan_id: Identificador da invocação

    Returns:
        ScanStateMachine em IDLE
    """
    return ScanStateMachine(scan_id=scan_id)
