"""Registros de transição da máquina de scan."""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
