"""Factories de dependências concretas escolhidas por settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.stores import JsonFileAtendimentoStore, MemoryAtendimentoStore
from config.logging import get_logger

if TYPE_CHECKING:
    from app.protocols.atendimento_store import AtendimentoStoreProtocol
    from config.settings import DashboardSettings

logger = get_logger(__name__)


def create_atendimento_store(settings: DashboardSettings) -> AtendimentoStoreProtocol:
    """Cria o store conforme DASHBOARD_STORE_BACKEND.

    memory: apenas dev/test. json: arquivo em DASHBOARD_STORE_PATH.
    """
    if settings.store_backend == "json":
        logger.info("atendimento_store_selected", extra={"backend": "json"})
        return JsonFileAtendimentoStore(settings.store_path)

    logger.info("atendimento_store_selected", extra={"backend": "memory"})
    return MemoryAtendimentoStore()
