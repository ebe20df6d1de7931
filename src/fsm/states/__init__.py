"""
Exports públicos do módulo fsm/states.

Estados canônicos de uma invocação de scan.
"""

from fsm.states.scan import (
    DEFAULT_INITIAL_STATE,
    IN_FLIGHT_STATES,
    TERMINAL_STATES,
    ScanState,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "IN_FLIGHT_STATES",
    "TERMINAL_STATES",
    "ScanState",
    "is_terminal",
]
