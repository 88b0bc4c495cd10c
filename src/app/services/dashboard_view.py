"""Estado da tela inicial: período, lista visível e totais.

A lista visível é uma projeção descartável do store (filtro de escopo) e
é sempre reconstruída por inteiro, nunca corrigida item a item.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.domain.dashboard import DashboardTotals, Period
from app.services.aggregator import compute_totals
from app.services.atendimento_filter import scope_filter
from app.services.period_resolver import parse_period
from config.logging import get_logger
from config.settings.dashboard import DashboardSettings
from utils.errors import AtendimentoNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from zoneinfo import ZoneInfo

    from app.domain.atendimento import Atendimento
    from app.protocols.atendimento_store import AtendimentoStoreProtocol

logger = get_logger(__name__)


class DashboardView:
    """Mantém a seleção de período e recalcula os totais dependentes."""

    def __init__(
        self,
        store: AtendimentoStoreProtocol,
        settings: DashboardSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or DashboardSettings()
        self._tz: ZoneInfo = self._settings.tzinfo
        self._clock = clock or (lambda: datetime.now(self._tz))
        self._period = parse_period(self._settings.default_period)
        self._visible: list[Atendimento] = []
        self._totals = DashboardTotals()

    @property
    def settings(self) -> DashboardSettings:
        return self._settings

    @property
    def tz(self) -> ZoneInfo:
        """Fuso efetivo do painel (já com fallback aplicado)."""
        return self._tz

    @property
    def current_period(self) -> Period:
        return self._period

    @property
    def visible_atendimentos(self) -> list[Atendimento]:
        return list(self._visible)

    @property
    def totals(self) -> DashboardTotals:
        return self._totals

    def now(self) -> datetime:
        """Instante de referência no fuso do painel."""
        moment = self._clock()
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self._tz)
        return moment.astimezone(self._tz)

    def load(self) -> None:
        """Relê o store e reconstrói lista e totais.

        Raises:
            StoreError: Se o store não puder ser lido.
        """
        self.refresh(self._store.list_all())

    def refresh(self, records: Iterable[Atendimento]) -> None:
        """Reconstrói a projeção a partir de uma lista completa do store."""
        self._visible = scope_filter(records, self._settings.reserved_service_type)
        self._recompute_totals()
        logger.debug(
            "dashboard_refreshed",
            extra={"visible_count": len(self._visible), "period": self._period.value},
        )

    def set_period(self, token: str | Period | None) -> Period:
        """Troca o período e recalcula apenas os totais."""
        self._period = parse_period(token)
        self._recompute_totals()
        return self._period

    def get_visible(self, atendimento_id: str) -> Atendimento:
        """Busca um atendimento na lista visível.

        Raises:
            AtendimentoNotFoundError: Se o id não estiver visível.
        """
        for record in self._visible:
            if record.id == atendimento_id:
                return record
        raise AtendimentoNotFoundError(atendimento_id)

    def _recompute_totals(self) -> None:
        self._totals = compute_totals(self._visible, self._period, self.now(), self._tz)
