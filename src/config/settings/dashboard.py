"""Settings do painel: fuso, tipo de serviço reservado e backend do store.

A leitura de env fica concentrada aqui para que serviços recebam valores
já validados em vez de consultar `os.environ` diretamente.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field

from config.logging import get_logger, log_fallback

StoreBackend = Literal["memory", "json"]

RESERVED_SERVICE_TYPE = "tarot-frequencial"

DEFAULT_TIMEZONE = "America/Sao_Paulo"

logger = get_logger(__name__)

_VALID_PERIOD_TOKENS = frozenset({"day", "week", "month", "year", "dia", "semana", "mes", "mês", "ano"})


class DashboardSettings(BaseModel):
    """Configurações consumidas pelo núcleo de agregação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="Fuso usado para 'agora' e para datas sem offset.",
    )
    reserved_service_type: str = Field(
        default=RESERVED_SERVICE_TYPE,
        description="Tipo de serviço que nunca aparece no painel.",
    )
    default_period: str = Field(
        default="week",
        description="Período selecionado ao abrir o painel.",
    )
    store_backend: StoreBackend = Field(
        default="memory",
        description="Implementação do store de atendimentos.",
    )
    store_path: str = Field(
        default="data/atendimentos.json",
        description="Arquivo JSON usado quando store_backend=json.",
    )

    @property
    def tzinfo(self) -> ZoneInfo:
        """ZoneInfo do fuso configurado.

        Fuso desconhecido cai em DEFAULT_TIMEZONE (registrado como fallback);
        em ambiente estrito o boot já falhou em `validate_settings`.
        """
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            log_fallback(logger, "dashboard_settings", reason="invalid_timezone", value=DEFAULT_TIMEZONE)
            return ZoneInfo(DEFAULT_TIMEZONE)

    def validate_settings(self) -> list[str]:
        """Valida combinações que o pydantic não cobre.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"DASHBOARD_TIMEZONE inválido: {self.timezone}")

        if not self.reserved_service_type.strip():
            errors.append("DASHBOARD_RESERVED_SERVICE_TYPE não pode ser vazio")

        if self.default_period.strip().lower() not in _VALID_PERIOD_TOKENS:
            errors.append(f"DASHBOARD_DEFAULT_PERIOD inválido: {self.default_period}")

        if self.store_backend == "json" and not self.store_path.strip():
            errors.append("DASHBOARD_STORE_PATH obrigatório para backend json")

        return errors


def _parse_backend(value: str) -> StoreBackend:
    """Converte texto de env em StoreBackend (desconhecido vira memory)."""
    return "json" if value.strip().lower() == "json" else "memory"


def _load_dashboard_from_env() -> DashboardSettings:
    """Carrega DashboardSettings a partir de variáveis de ambiente."""
    return DashboardSettings(
        timezone=os.getenv("DASHBOARD_TIMEZONE", DEFAULT_TIMEZONE),
        reserved_service_type=os.getenv(
            "DASHBOARD_RESERVED_SERVICE_TYPE", RESERVED_SERVICE_TYPE
        ),
        default_period=os.getenv("DASHBOARD_DEFAULT_PERIOD", "week"),
        store_backend=_parse_backend(os.getenv("DASHBOARD_STORE_BACKEND", "memory")),
        store_path=os.getenv("DASHBOARD_STORE_PATH", "data/atendimentos.json"),
    )


@lru_cache(maxsize=1)
def get_dashboard_settings() -> DashboardSettings:
    """Retorna instância cacheada de DashboardSettings."""
    return _load_dashboard_from_env()


__all__ = [
    "DEFAULT_TIMEZONE",
    "RESERVED_SERVICE_TYPE",
    "DashboardSettings",
    "StoreBackend",
    "get_dashboard_settings",
]
