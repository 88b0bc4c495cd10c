"""Rotas HTTP do painel.

Todas as operações passam pelo lock do painel: um escritor por vez e
marcar → confirmar/cancelar atômico em relação às leituras.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from api.routes.dashboard.schemas import (
    DashboardResponse,
    DeletionResponse,
    EditResponse,
    PeriodUpdateRequest,
)
from app.bootstrap.dashboard_factory import DashboardComponents
from app.services.dashboard_presenter import build_snapshot
from utils.errors import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


def _components(request: Request) -> DashboardComponents:
    components = getattr(request.app.state, "dashboard", None)
    if components is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="dashboard_not_ready")
    return components


def _deletion_response(components: DashboardComponents, applied: bool) -> DeletionResponse:
    coordinator = components.coordinator
    return DeletionResponse(
        state=coordinator.deletion_state,
        staged_id=coordinator.staged_id,
        applied=applied,
        snapshot=build_snapshot(components.view),
        notifications=components.notifier.drain(),
    )


@router.get("", response_model=DashboardResponse)
def get_dashboard(request: Request) -> DashboardResponse:
    """Recarrega o store e devolve cards e tabela."""
    components = _components(request)
    with components.lock:
        try:
            components.view.load()
        except StoreError as exc:
            logger.error("dashboard_load_failed", extra={"error_type": type(exc).__name__})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="store_unavailable",
            ) from exc
        return DashboardResponse(
            snapshot=build_snapshot(components.view),
            notifications=components.notifier.drain(),
        )


@router.put("/period", response_model=DashboardResponse)
def update_period(body: PeriodUpdateRequest, request: Request) -> DashboardResponse:
    """Troca o período; só os totais são recalculados."""
    components = _components(request)
    with components.lock:
        components.view.set_period(body.period)
        return DashboardResponse(
            snapshot=build_snapshot(components.view),
            notifications=components.notifier.drain(),
        )


@router.post("/atendimentos/{atendimento_id}/edit", response_model=EditResponse)
def request_edit(atendimento_id: str, request: Request) -> EditResponse | JSONResponse:
    """Devolve o caminho do editor, ou 404 se o id não está visível."""
    components = _components(request)
    with components.lock:
        opened = components.coordinator.request_edit(atendimento_id)
        response = EditResponse(
            redirect_to=components.navigator.consume() if opened else None,
            notifications=components.notifier.drain(),
        )
    if not opened:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=response.model_dump(mode="json"),
        )
    return response


@router.post("/atendimentos/{atendimento_id}/delete", response_model=DeletionResponse)
def stage_delete(atendimento_id: str, request: Request) -> DeletionResponse:
    """Marca o atendimento para exclusão (sem alterar o store)."""
    components = _components(request)
    with components.lock:
        applied = components.coordinator.request_delete(atendimento_id)
        return _deletion_response(components, applied)


@router.post("/delete/confirm", response_model=DeletionResponse)
def confirm_delete(request: Request) -> DeletionResponse:
    components = _components(request)
    with components.lock:
        applied = components.coordinator.confirm_delete()
        return _deletion_response(components, applied)


@router.post("/delete/cancel", response_model=DeletionResponse)
def cancel_delete(request: Request) -> DeletionResponse:
    components = _components(request)
    with components.lock:
        applied = components.coordinator.cancel_delete()
        return _deletion_response(components, applied)
