"""Dados prontos para a tela inicial (cards e tabela de atendimentos)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.atendimento import PaymentStatus
from app.domain.dashboard import Period
from app.services.aggregator import parse_amount
from app.services.atendimento_filter import parse_appointment_date
from app.services.period_resolver import parse_period

if TYPE_CHECKING:
    from datetime import tzinfo

    from app.domain.atendimento import Atendimento
    from app.services.dashboard_view import DashboardView

BadgeVariant = Literal["success", "warning", "danger", "neutral"]

PERIOD_LABELS: dict[Period, str] = {
    Period.DAY: "Hoje",
    Period.WEEK: "Esta Semana",
    Period.MONTH: "Este Mês",
    Period.YEAR: "Este Ano",
}

STATUS_BADGES: dict[PaymentStatus, BadgeVariant] = {
    PaymentStatus.PAID: "success",
    PaymentStatus.PENDING: "warning",
    PaymentStatus.INSTALLMENT: "danger",
}

_CENTS = Decimal("0.01")


class AtendimentoRow(BaseModel):
    """Linha da tabela de atendimentos recentes."""

    model_config = ConfigDict(frozen=True)

    id: str
    client_name: str
    date_display: str = Field(..., description="dd/mm/aaaa ou vazio se a data for ilegível.")
    service_label: str
    amount_display: str
    payment_status: PaymentStatus | None
    status_label: str | None
    status_badge: BadgeVariant
    attention_flag: bool
    attention_note: str | None


class DashboardSnapshot(BaseModel):
    """Tudo que a tela inicial exibe."""

    model_config = ConfigDict(frozen=True)

    period: Period
    period_label: str
    count: int
    week_count: int
    period_count: int
    period_amount: Decimal
    period_amount_display: str
    atendimentos: list[AtendimentoRow]


def period_label(period: Period | str) -> str:
    """Rótulo do card de receita; desconhecido cai em "Esta Semana"."""
    return PERIOD_LABELS[parse_period(period)]


def format_currency(amount: Decimal) -> str:
    """R$ com duas casas e ponto decimal (ex: "R$ 15.50")."""
    return f"R$ {amount.quantize(_CENTS, rounding=ROUND_HALF_UP)}"


def status_badge(status: PaymentStatus | None) -> BadgeVariant:
    if status is None:
        return "neutral"
    return STATUS_BADGES[status]


def service_label(service_type: str) -> str:
    """Troca o primeiro hífen por espaço ("tarot-frequencial" -> "tarot frequencial")."""
    return service_type.replace("-", " ", 1)


def build_row(record: Atendimento, tz: tzinfo) -> AtendimentoRow:
    instant = parse_appointment_date(record.appointment_date, tz)
    status = record.payment_status
    return AtendimentoRow(
        id=record.id,
        client_name=record.client_name,
        date_display=instant.strftime("%d/%m/%Y") if instant else "",
        service_label=service_label(record.service_type),
        amount_display=format_currency(parse_amount(record.amount)),
        payment_status=status,
        status_label=status.value.upper() if status else None,
        status_badge=status_badge(status),
        attention_flag=record.attention_flag,
        attention_note=record.attention_note,
    )


def build_snapshot(view: DashboardView) -> DashboardSnapshot:
    totals = view.totals
    tz = view.tz
    return DashboardSnapshot(
        period=view.current_period,
        period_label=period_label(view.current_period),
        count=totals.count,
        week_count=totals.week_count,
        period_count=totals.period_count,
        period_amount=totals.period_amount,
        period_amount_display=format_currency(totals.period_amount),
        atendimentos=[build_row(record, tz) for record in view.visible_atendimentos],
    )


__all__ = [
    "PERIOD_LABELS",
    "AtendimentoRow",
    "DashboardSnapshot",
    "build_row",
    "build_snapshot",
    "format_currency",
    "period_label",
    "service_label",
    "status_badge",
]
