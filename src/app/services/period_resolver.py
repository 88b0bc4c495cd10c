"""Converte o período selecionado em um intervalo concreto de datas.

Todos os intervalos terminam no fim do dia de `now` (23:59:59.999) e
começam à meia-noite. Semana começa no domingo, incluindo hoje.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from app.domain.dashboard import DEFAULT_PERIOD, DateRange, Period
from config.logging import get_logger, log_fallback

logger = get_logger(__name__)

_PERIOD_VALUES = frozenset(period.value for period in Period)

# Aliases em português
_PERIOD_ALIASES: dict[str, Period] = {
    "dia": Period.DAY,
    "semana": Period.WEEK,
    "mes": Period.MONTH,
    "mês": Period.MONTH,
    "ano": Period.YEAR,
}


def parse_period(token: str | Period | None) -> Period:
    """Normaliza um token de período; desconhecido vira `week`.

    Nunca levanta exceção: o painel precisa continuar renderizável.
    """
    if isinstance(token, Period):
        return token

    normalized = (token or "").strip().lower()
    if normalized in _PERIOD_VALUES:
        return Period(normalized)

    alias = _PERIOD_ALIASES.get(normalized)
    if alias is not None:
        return alias

    log_fallback(
        logger,
        "period_resolver",
        reason="unknown_period",
        value=DEFAULT_PERIOD.value,
    )
    return DEFAULT_PERIOD


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """23:59:59.999 do mesmo dia (precisão de milissegundo)."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def resolve_range(period: str | Period | None, now: datetime) -> DateRange:
    """Retorna [start, end] do período ancorado em `now`.

    Args:
        period: day|week|month|year (ou alias em português); inválido = week.
        now: Instante de referência; o tzinfo é preservado em start e end.
    """
    resolved = parse_period(period)
    today = start_of_day(now)

    if resolved is Period.DAY:
        start = today
    elif resolved is Period.MONTH:
        start = today.replace(day=1)
    elif resolved is Period.YEAR:
        start = today.replace(month=1, day=1)
    else:
        # weekday(): segunda=0 ... domingo=6
        days_since_sunday = (today.weekday() + 1) % 7
        start = today - timedelta(days=days_since_sunday)

    return DateRange(start=start, end=end_of_day(now))


__all__ = ["end_of_day", "parse_period", "resolve_range", "start_of_day"]
