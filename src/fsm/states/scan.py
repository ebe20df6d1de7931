"""
Estados canônicos de uma invocação de scan de cartão de visita.

Cada imagem enviada percorre uma máquina nova:
IDLE → UPLOADING → AWAITING_MODEL → PARSING → {SUCCEEDED | FAILED}.
"""

from enum import StrEnum


class ScanState(StrEnum):
    """
    Estados de uma invocação do scanner.

    Estados não-terminais:
        - IDLE: Nenhuma imagem em processamento
        - UPLOADING: Imagem recebida, montando a requisição
        - AWAITING_MODEL: Requisição enviada, aguardando o gateway
        - PARSING: Conteúdo textual recebido, extraindo JSON

    Estados terminais:
        - SUCCEEDED: Dados extraídos e normalizados
        - FAILED: Falha classificada (rate limit, quota, upstream, parse...)
    """

    IDLE = "IDLE"
    UPLOADING = "UPLOADING"
    AWAITING_MODEL = "AWAITING_MODEL"
    PARSING = "PARSING"

    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


# Uma vez em estado terminal, a invocação não transita mais
TERMINAL_STATES: frozenset[ScanState] = frozenset({
    ScanState.SUCCEEDED,
    ScanState.FAILED,
})

# Estados em que há trabalho em andamento (cancelamento volta a IDLE)
IN_FLIGHT_STATES: frozenset[ScanState] = frozenset({
    ScanState.UPLOADING,
    ScanState.AWAITING_MODEL,
    ScanState.PARSING,
})

DEFAULT_INITIAL_STATE: ScanState = ScanState.IDLE


def is_terminal(state: ScanState) -> bool:
    """Verifica se o estado é terminal."""
    return state in TERMINAL_STATES
