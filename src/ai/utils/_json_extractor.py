"""Extrator de JSON de respostas de LLM.

Extrai um objeto JSON de respostas brutas que podem conter markdown
ou texto explicativo em volta.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal

Strategy = Literal["whole_text", "embedded_block"]

# Limite de posições "{" testadas no fallback (respostas patológicas).
_MAX_BLOCK_ATTEMPTS = 50

_DECODER = json.JSONDecoder()


@dataclass(frozen=True, slots=True)
class JsonExtraction:
    """Resultado da extração: objeto encontrado OU motivo da falha."""

    ok: bool
    data: dict[str, Any] = field(default_factory=dict)
    strategy: Strategy | None = None
    reason: str | None = None


def extract_json_object(response: Any) -> JsonExtraction:
    """Extrai o primeiro objeto JSON de uma resposta de LLM.

    Ordem de tentativa:
    1. Texto inteiro (após remover cercas de markdown)
    2. Primeiro bloco {...} balanceado que decodifica como objeto

    Args:
        response: Conteúdo textual retornado pelo modelo.

    Returns:
        JsonExtraction com o dict ou o motivo ("empty", "no_json_object").
    """
    if not isinstance(response, str) or not response.strip():
        return JsonExtraction(ok=False, reason="empty")

    text = _strip_code_fences(response)

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        data = None
    if isinstance(data, dict):
        return JsonExtraction(ok=True, data=data, strategy="whole_text")

    embedded = _first_embedded_object(text)
    if embedded is not None:
        return JsonExtraction(ok=True, data=embedded, strategy="embedded_block")

    return JsonExtraction(ok=False, reason="no_json_object")


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Atalho que retorna o dict extraído ou None."""
    result = extract_json_object(response)
    return result.data if result.ok else None


def _strip_code_fences(response: str) -> str:
    text = response.strip()

    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]

    if text.endswith("```"):
        text = text[:-3]

    return text.strip()


def _first_embedded_object(text: str) -> dict[str, Any] | None:
    start = text.find("{")
    attempts = 0
    while start != -1 and attempts < _MAX_BLOCK_ATTEMPTS:
        attempts += 1
        try:
            candidate, _ = _DECODER.raw_decode(text, start)
        except (ValueError, RecursionError):
            candidate = None
        if isinstance(candidate, dict):
            return candidate
        start = text.find("{", start + 1)
    return None
