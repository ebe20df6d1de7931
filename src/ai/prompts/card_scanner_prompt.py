"""Prompt do scanner de cartão de visita.

Textos vêm de config/agents/card_scanner.yaml.
"""

from __future__ import annotations

from typing import Any

from ai.config.agent_config import AgentConfig, load_agent_config

CARD_SCANNER_AGENT = "card_scanner"


def build_card_scanner_messages(
    image_data: str,
    config: AgentConfig | None = None,
) -> list[dict[str, Any]]:
    """Monta mensagens system + user (texto e imagem) para o gateway.

    Args:
        image_data: Imagem codificada (data URL ou URL).
        config: Config do agente (default: YAML do card_scanner).
    """
    agent = config or load_agent_config(CARD_SCANNER_AGENT)
    user_text = agent.user_prompt.format(fields=", ".join(agent.fields))
    return [
        {"role": "system", "content": agent.system_prompt},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": user_text},
                {"type": "image_url", "image_url": {"url": image_data}},
            ],
        },
    ]
