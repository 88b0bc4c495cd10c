"""Montagem do painel: store, view, coordinator e colaboradores."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.bootstrap.dependencies import create_atendimento_store
from app.infra.navigation import RecordingNavigator
from app.infra.notifications import MemoryNotificationSink
from app.services.dashboard_view import DashboardView
from app.services.mutation_coordinator import MutationCoordinator
from config.settings import get_dashboard_settings

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from app.protocols.atendimento_store import AtendimentoStoreProtocol
    from config.settings import DashboardSettings


@dataclass
class DashboardComponents:
    """Peças do painel compartilhadas pela camada HTTP.

    `lock` serializa todas as operações (um único escritor no store e
    marcar → confirmar/cancelar atômico em relação às leituras).
    """

    store: AtendimentoStoreProtocol
    view: DashboardView
    coordinator: MutationCoordinator
    notifier: MemoryNotificationSink
    navigator: RecordingNavigator
    lock: threading.Lock = field(default_factory=threading.Lock)


def create_dashboard(
    *,
    store: AtendimentoStoreProtocol | None = None,
    settings: DashboardSettings | None = None,
    clock: Callable[[], datetime] | None = None,
    load: bool = True,
) -> DashboardComponents:
    """Cria o painel completo e, por padrão, carrega o store.

    Raises:
        StoreError: Se `load=True` e o store não puder ser lido.
    """
    resolved_settings = settings or get_dashboard_settings()
    resolved_store = store if store is not None else create_atendimento_store(resolved_settings)
    view = DashboardView(resolved_store, settings=resolved_settings, clock=clock)
    notifier = MemoryNotificationSink()
    navigator = RecordingNavigator()
    coordinator = MutationCoordinator(
        store=resolved_store,
        view=view,
        notifier=notifier,
        navigator=navigator,
    )
    if load:
        view.load()
    return DashboardComponents(
        store=resolved_store,
        view=view,
        coordinator=coordinator,
        notifier=notifier,
        navigator=navigator,
    )
