"""Entrypoint HTTP do painel de atendimentos.

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.routes import create_api_router
from app.bootstrap import create_dashboard, initialize_app, validate_runtime_settings
from app.observability.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from utils.errors import StoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from app.bootstrap import DashboardComponents

initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings e monta o painel no startup.

    Se o store não puder ser lido, o painel sobe vazio e /ready reporta falha.
    """
    logger.info("app_starting")
    validate_runtime_settings()
    if getattr(app.state, "dashboard", None) is None:
        components = create_dashboard(load=False)
        try:
            components.view.load()
        except StoreError as exc:
            logger.warning("dashboard_initial_load_failed", extra={"error_type": type(exc).__name__})
        app.state.dashboard = components

    yield

    logger.info("app_shutting_down")


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app(dashboard: DashboardComponents | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        dashboard: Painel já montado (testes); None monta a partir das settings.
    """
    fastapi_app = FastAPI(
        title="Painel de Atendimentos",
        description="Agregação de receita e gestão de atendimentos",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.dashboard = dashboard
    fastapi_app.middleware("http")(correlation_middleware)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")
    return fastapi_app


app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting painel_atendimentos in development mode")
    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
