"""Settings base do serviço de cartão de visita.

Ambiente, identificação do serviço, nível de log e origens CORS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_VALID_ENVIRONMENTS: frozenset[str] = frozenset({"development", "staging", "production"})
_VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Ambientes onde settings inválidas impedem o boot
STRICT_VALIDATION_ENVS: frozenset[str] = frozenset({"staging", "production"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: development|staging|production
        service_name: Valor do campo `service` nos logs
        debug: Modo debug ativo
        log_level: Nível de log do root logger
        cors_origins: Origens liberadas para o front-end ("*" = todas)
    """

    environment: Environment = "development"
    service_name: str = "cartao_visita"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def strict_validation(self) -> bool:
        """True quando erros de configuração devem abortar o startup."""
        return self.environment in STRICT_VALIDATION_ENVS

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in _VALID_ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.is_production and "*" in self.cors_origins:
            errors.append("CORS_ALLOWED_ORIGINS não pode ser '*' em produção")

        return errors


def _parse_environment(raw: str) -> Environment:
    value = raw.strip().lower()
    if value in ("production", "prod"):
        return "production"
    if value in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "cartao_visita"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS", "")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
