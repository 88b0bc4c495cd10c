"""Contagens e somas monetárias sobre listas de atendimentos."""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from app.domain.dashboard import DashboardTotals, Period
from app.services.atendimento_filter import filter_by_range
from app.services.period_resolver import resolve_range

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.atendimento import Atendimento

ZERO = Decimal("0")

# Valores com mais de 15 dígitos inteiros são tratados como digitação inválida
MAX_AMOUNT_EXPONENT = 14

# Número decimal no início do texto, como o parseFloat do navegador
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(value: str | None) -> Decimal:
    """Valor do atendimento como Decimal; vazio ou inválido vale 0.

    "12.50" -> 12.50, "12.5abc" -> 12.5, "abc" -> 0, "" -> 0.
    Valores não finitos ou com módulo a partir de 10^15 também valem 0.
    """
    if not value:
        return ZERO
    match = _LEADING_NUMBER.match(value.strip())
    if match is None:
        return ZERO
    try:
        amount = Decimal(match.group(0))
    except InvalidOperation:
        return ZERO
    if not amount.is_finite() or not amount or amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return ZERO
    return amount


def count(records: Sequence[Atendimento]) -> int:
    return len(records)


def sum_amounts(records: Sequence[Atendimento]) -> Decimal:
    return sum((parse_amount(record.amount) for record in records), ZERO)


def compute_totals(
    records: Sequence[Atendimento],
    period: Period,
    now: datetime,
    tz: tzinfo,
) -> DashboardTotals:
    """Totais dos cards a partir da lista já filtrada por escopo.

    `week_count` usa sempre o intervalo semanal, qualquer que seja `period`.
    """
    in_period = filter_by_range(records, resolve_range(period, now), tz)
    in_week = filter_by_range(records, resolve_range(Period.WEEK, now), tz)
    return DashboardTotals(
        count=count(records),
        week_count=count(in_week),
        period_amount=sum_amounts(in_period),
        period_count=count(in_period),
    )


__all__ = ["MAX_AMOUNT_EXPONENT", "ZERO", "compute_totals", "count", "parse_amount", "sum_amounts"]
