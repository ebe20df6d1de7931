"""Configuração de IA (YAML por agente)."""

from ai.config.agent_config import AgentConfig, load_agent_config

__all__ = [
    "AgentConfig",
    "load_agent_config",
]
