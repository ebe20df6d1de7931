"""Loader de configuração YAML para agentes.

Carrega e valida configurações de config/agents/{agent_name}.yaml.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

# Diretório base de configuração de agentes (src/config/agents/)
_CONFIG_DIR = Path(__file__).parent.parent.parent / "config" / "agents"

_DEFAULT_MODEL = "google/gemini-2.5-flash"


@dataclass(frozen=True, slots=True)
class AgentConfig:
    """Configuração de um agente de visão."""

    agent_name: str
    version: str
    description: str
    model_name: str
    system_prompt: str
    user_prompt: str
    fields: tuple[str, ...]
    behavior: dict[str, Any]


@functools.lru_cache(maxsize=8)
def load_agent_config(agent_name: str) -> AgentConfig:
    """Carrega configuração do agente de YAML (com cache).

    Args:
        agent_name: Nome do agente (ex: "card_scanner")

    Returns:
        AgentConfig com dados do YAML

    Raises:
        FileNotFoundError: Se arquivo YAML não existe
        ValueError: Se YAML tem schema inválido
    """
    yaml_path = _CONFIG_DIR / f"{agent_name}.yaml"
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config não encontrada: {yaml_path}")

    with yaml_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return _parse_config(data, agent_name)


def _parse_config(data: Any, agent_name: str) -> AgentConfig:
    """Valida e parseia dados do YAML."""
    if not isinstance(data, dict):
        raise ValueError(f"Config de {agent_name} deve ser dict")

    model = data.get("model") or {}
    behavior = data.get("behavior") or {}
    prompts = data.get("prompts") or {}
    if not isinstance(behavior, dict):
        behavior = {}

    fields = behavior.get("fields") or []
    if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
        raise ValueError(f"behavior.fields de {agent_name} deve ser lista de strings")

    system_prompt = str(prompts.get("system", "")).strip()
    user_prompt = str(prompts.get("user", "")).strip()
    if not system_prompt or not user_prompt:
        raise ValueError(f"prompts.system e prompts.user são obrigatórios em {agent_name}")

    return AgentConfig(
        agent_name=str(data.get("agent_name", agent_name)),
        version=str(data.get("version", "1.0.0")),
        description=str(data.get("description", "")),
        model_name=str(model.get("name", _DEFAULT_MODEL)),
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        fields=tuple(fields),
        behavior=behavior,
    )
