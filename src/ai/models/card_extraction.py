"""Models do scanner de cartão de visita.

Define o resultado normalizado de uma invocação e os tipos de falha
exibíveis ao usuário.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

from fsm.states.scan import ScanState


class ScanErrorKind(StrEnum):
    """Categoria da falha de um scan."""

    INVALID_INPUT = "invalid_input"
    NOT_CONFIGURED = "not_configured"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXHAUSTED = "quota_exhausted"
    UPSTREAM_ERROR = "upstream_error"
    PARSE_FAILED = "parse_failed"
    UNEXPECTED = "unexpected"


SCAN_ERROR_MESSAGES: dict[ScanErrorKind, str] = {
    ScanErrorKind.INVALID_INPUT: "Nenhuma imagem enviada",
    ScanErrorKind.NOT_CONFIGURED: "Scanner de cartões não está configurado",
    ScanErrorKind.RATE_LIMITED: "Limite de requisições excedido. Tente novamente mais tarde.",
    ScanErrorKind.QUOTA_EXHAUSTED: "Créditos esgotados. Adicione créditos ao workspace.",
    ScanErrorKind.UPSTREAM_ERROR: "Gateway de IA indisponível",
    ScanErrorKind.PARSE_FAILED: "Não foi possível extrair os dados de contato da imagem",
    ScanErrorKind.UNEXPECTED: "Erro inesperado ao processar o cartão",
}


@dataclass(frozen=True, slots=True)
class ExtractedCardData:
    """Campos extraídos de um cartão (strings possivelmente vazias).

    Nunca é persistido diretamente: passa pelo merge + schema guard.
    """

    name: str = ""
    title: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def non_empty_fields(self) -> dict[str, str]:
        """Somente campos preenchidos (os que sobrescrevem no merge)."""
        return {key: value for key, value in self.to_dict().items() if value}


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Resultado de uma invocação do scanner.

    Attributes:
        success: Se os dados foram extraídos
        data: Campos extraídos (somente em sucesso)
        error: Mensagem exibível (somente em falha)
        error_kind: Categoria da falha
        final_state: Estado terminal da máquina da invocação
    """

    success: bool
    data: ExtractedCardData | None = None
    error: str | None = None
    error_kind: ScanErrorKind | None = None
    final_state: ScanState = ScanState.SUCCEEDED

    def __post_init__(self) -> None:
        if self.success and self.data is None:
            raise ValueError("ScanResult bem-sucedido deve incluir data")
        if not self.success and (self.error is None or self.error_kind is None):
            raise ValueError("ScanResult com falha deve incluir error e error_kind")

    @classmethod
    def ok(cls, data: ExtractedCardData) -> ScanResult:
        return cls(success=True, data=data, final_state=ScanState.SUCCEEDED)

    @classmethod
    def failed(cls, kind: ScanErrorKind, message: str | None = None) -> ScanResult:
        return cls(
            success=False,
            error=message or SCAN_ERROR_MESSAGES[kind],
            error_kind=kind,
            final_state=ScanState.FAILED,
        )

    def to_payload(self) -> dict[str, Any]:
        """Formato de fronteira: {success, data} ou {success, error}."""
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
