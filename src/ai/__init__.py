"""Módulo AI do serviço de cartão de visita.

Implementa o scanner de cartões: prompt, contrato do cliente de visão,
extração defensiva de JSON e mapeamento de campos. Não faz IO direto;
o cliente HTTP concreto fica em app/infra/ai.
"""

from ai.config import AgentConfig, load_agent_config
from ai.core import VisionClientProtocol
from ai.models import ExtractedCardData, ScanErrorKind, ScanResult
from ai.services import CardScannerService

__all__ = [
    "AgentConfig",
    "CardScannerService",
    "ExtractedCardData",
    "ScanErrorKind",
    "ScanResult",
    "VisionClientProtocol",
    "load_agent_config",
]
