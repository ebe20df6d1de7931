"""Core do módulo AI.

Exporta o protocolo do cliente de visão.
A implementação HTTP está em app/infra/ai/ (IO).
"""

from ai.core.card_scanner_client import VisionClientProtocol

__all__ = [
    "VisionClientProtocol",
]
