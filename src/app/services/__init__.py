"""Serviços de aplicação do painel.

Unidades de regra de negócio sem IO direto; o store entra por protocolo.
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.aggregator import compute_totals, count, parse_amount, sum_amounts
from app.services.atendimento_filter import filter_by_range, parse_appointment_date, scope_filter
from app.services.dashboard_presenter import DashboardSnapshot, build_snapshot
from app.services.dashboard_view import DashboardView
from app.services.mutation_coordinator import MutationCoordinator
from app.services.period_resolver import parse_period, resolve_range

__all__ = [
    "DashboardSnapshot",
    "DashboardView",
    "MutationCoordinator",
    "build_snapshot",
    "compute_totals",
    "count",
    "filter_by_range",
    "parse_amount",
    "parse_appointment_date",
    "parse_period",
    "resolve_range",
    "scope_filter",
    "sum_amounts",
]
