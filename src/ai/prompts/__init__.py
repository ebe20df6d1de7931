"""Prompts do módulo AI.

Textos ficam em config/agents/*.yaml; aqui só a montagem das mensagens.
"""

from ai.prompts.card_scanner_prompt import CARD_SCANNER_AGENT, build_card_scanner_messages

__all__ = [
    "CARD_SCANNER_AGENT",
    "build_card_scanner_messages",
]
