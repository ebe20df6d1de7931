"""
Exports públicos do módulo fsm/manager.

Máquina de estados (ScanStateMachine) de uma invocação de scan.
"""

from fsm.manager.machine import ScanStateMachine, create_scan_fsm

__all__ = [
    "ScanStateMachine",
    "create_scan_fsm",
]
