"""Utilitários de IA.

Re-exporta o extrator de JSON e a normalização de campos do cartão.
"""

from ai.utils._json_extractor import (
    JsonExtraction,
    extract_json_from_response,
    extract_json_object,
)
from ai.utils.card_extraction import map_extracted_fields

__all__ = [
    "JsonExtraction",
    "extract_json_from_response",
    "extract_json_object",
    "map_extracted_fields",
]
