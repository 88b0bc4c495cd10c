"""Agregador de rotas do painel.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.dashboard.router import router as dashboard_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # /health e /ready na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        dashboard_router,
        prefix="/dashboard",
        tags=["dashboard"],
    )

    return api_router
