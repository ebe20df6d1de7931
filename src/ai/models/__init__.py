"""Modelos/DTOs do scanner de cartões."""

from ai.models.card_extraction import (
    SCAN_ERROR_MESSAGES,
    ExtractedCardData,
    ScanErrorKind,
    ScanResult,
)

__all__ = [
    "SCAN_ERROR_MESSAGES",
    "ExtractedCardData",
    "ScanErrorKind",
    "ScanResult",
]
