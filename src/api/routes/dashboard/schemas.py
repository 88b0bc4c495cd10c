"""Modelos de request/response dos endpoints do painel."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.domain.dashboard import Notification
from app.services.dashboard_presenter import DashboardSnapshot
from fsm import DeletionState


class PeriodUpdateRequest(BaseModel):
    """Novo período; valores desconhecidos caem em "week"."""

    period: str = Field(..., description="day|week|month|year (ou dia|semana|mes|ano).")


class DashboardResponse(BaseModel):
    snapshot: DashboardSnapshot
    notifications: list[Notification] = Field(default_factory=list)


class EditResponse(BaseModel):
    redirect_to: str | None
    notifications: list[Notification] = Field(default_factory=list)


class DeletionResponse(BaseModel):
    """Estado da exclusão após a ação e o painel recalculado."""

    state: DeletionState
    staged_id: str | None
    applied: bool
    snapshot: DashboardSnapshot
    notifications: list[Notification] = Field(default_factory=list)
