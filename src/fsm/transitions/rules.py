"""
Regras de transição válidas entre estados do scan.

Grafo:
    IDLE → UPLOADING | FAILED (entrada inválida, gateway não configurado)
    UPLOADING → AWAITING_MODEL | FAILED | IDLE (cancelado)
    AWAITING_MODEL → PARSING | FAILED | IDLE (cancelado)
    PARSING → SUCCEEDED | FAILED | IDLE (cancelado)
    SUCCEEDED, FAILED → (terminal)
"""

from fsm.states.scan import TERMINAL_STATES, ScanState

TransitionMap = dict[ScanState, frozenset[ScanState]]

VALID_TRANSITIONS: TransitionMap = {
    ScanState.IDLE: frozenset({
        ScanState.UPLOADING,
        ScanState.FAILED,
    }),
    ScanState.UPLOADING: frozenset({
        ScanState.AWAITING_MODEL,
        ScanState.FAILED,
        ScanState.IDLE,
    }),
    ScanState.AWAITING_MODEL: frozenset({
        ScanState.PARSING,
        ScanState.FAILED,
        ScanState.IDLE,
    }),
    ScanState.PARSING: frozenset({
        ScanState.SUCCEEDED,
        ScanState.FAILED,
        ScanState.IDLE,
    }),
    ScanState.SUCCEEDED: frozenset(),
    ScanState.FAILED: frozenset(),
}


def get_valid_targets(state: ScanState) -> frozenset[ScanState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos (vazio se terminal)
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: ScanState, to_state: ScanState) -> bool:
    """Verifica se uma transição é permitida pelo grafo."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado terminal é alcançável a partir de PARSING ou IDLE

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in ScanState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    reachable = {target for targets in VALID_TRANSITIONS.values() for target in targets}
    for state in TERMINAL_STATES:
        if state not in reachable:
            errors.append(f"Estado terminal {state.name} inalcançável")

    return errors
