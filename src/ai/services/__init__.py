"""Serviços do módulo AI."""

from ai.services.card_scanner import CardScannerService

__all__ = [
    "CardScannerService",
]
