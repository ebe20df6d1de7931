"""
Módulo FSM: Máquina de Estados do scan de cartão de visita.

Cada imagem enviada ao scanner percorre uma máquina nova e
determinística; nenhum estado é compartilhado entre invocações.

Estrutura:
    - states/: Definições dos estados (ScanState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Máquina de estados (ScanStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

# Manager
from fsm.manager import (
    ScanStateMachine,
    create_scan_fsm,
)

# Estados
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    IN_FLIGHT_STATES,
    TERMINAL_STATES,
    ScanState,
    is_terminal,
)

# Transições
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

# Types
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "IN_FLIGHT_STATES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "ScanState",
    "ScanStateMachine",
    "StateTransition",
    "TransitionResult",
    "create_scan_fsm",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
