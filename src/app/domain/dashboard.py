"""Tipos de valor do painel: período, intervalo, totais e notificações."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - usado em runtime pelos dataclasses
from decimal import Decimal
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Period(StrEnum):
    """Janela de agregação de receita selecionada no painel."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def __str__(self) -> str:
        return self.value


DEFAULT_PERIOD: Period = Period.WEEK


@dataclass(frozen=True, slots=True)
class DateRange:
    """Intervalo fechado [start, end] usado nos filtros por período."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"start posterior a end: {self.start} > {self.end}")

    def contains(self, instant: datetime) -> bool:
        """True se start <= instant <= end."""
        return self.start <= instant <= self.end


@dataclass(frozen=True, slots=True)
class DashboardTotals:
    """Números exibidos nos cards do painel.

    Attributes:
        count: Total de atendimentos visíveis (sem filtro de período)
        week_count: Atendimentos da semana corrente, independente do período
        period_amount: Soma dos valores dentro do período selecionado
        period_count: Atendimentos dentro do período selecionado
    """

    count: int = 0
    week_count: int = 0
    period_amount: Decimal = Decimal("0")
    period_count: int = 0


NotificationKind = Literal["success", "error"]


class Notification(BaseModel):
    """Mensagem destinada ao usuário (toast)."""

    model_config = ConfigDict(frozen=True)

    kind: NotificationKind = Field(..., description="success ou error.")
    title: str = Field(..., description="Título curto.")
    message: str = Field(..., description="Texto exibido ao usuário.")


__all__ = [
    "DEFAULT_PERIOD",
    "DashboardTotals",
    "DateRange",
    "Notification",
    "NotificationKind",
    "Period",
]
