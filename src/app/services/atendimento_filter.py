"""Filtros de escopo e de intervalo sobre a lista de atendimentos."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from app.domain.dashboard import DateRange
from config.settings.dashboard import RESERVED_SERVICE_TYPE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.atendimento import Atendimento


def scope_filter(
    records: Iterable[Atendimento],
    reserved_service_type: str = RESERVED_SERVICE_TYPE,
) -> list[Atendimento]:
    """Remove o tipo de serviço reservado, preservando a ordem."""
    return [record for record in records if not record.is_service(reserved_service_type)]


def parse_appointment_date(value: str | None, tz: tzinfo) -> datetime | None:
    """Converte o texto da data em instante no fuso `tz`.

    Aceita data ou data/hora ISO-8601 (inclusive sufixo `Z`). Valores sem
    offset são interpretados em `tz`. Retorna None se não for parseável ou
    se a conversão sair do intervalo representável.
    """
    text = (value or "").strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=tz)
        return parsed.astimezone(tz)
    except (ValueError, OverflowError):
        return None


def _localize(moment: datetime, tz: tzinfo) -> datetime:
    return moment.replace(tzinfo=tz) if moment.tzinfo is None else moment


def filter_by_range(
    records: Iterable[Atendimento],
    date_range: DateRange,
    tz: tzinfo,
) -> list[Atendimento]:
    """Mantém atendimentos com data válida dentro de [start, end].

    Datas ilegíveis ficam de fora (mas continuam na lista sem filtro).
    """
    window = DateRange(_localize(date_range.start, tz), _localize(date_range.end, tz))
    selected: list[Atendimento] = []
    for record in records:
        instant = parse_appointment_date(record.appointment_date, tz)
        if instant is not None and window.contains(instant):
            selected.append(record)
    return selected


__all__ = ["filter_by_range", "parse_appointment_date", "scope_filter"]
