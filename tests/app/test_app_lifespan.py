"""Testes do lifespan da aplicação HTTP."""

from __future__ import annotations

import pytest

from app.app import create_app, lifespan
from app.bootstrap import create_dashboard
from app.infra.stores import MemoryAtendimentoStore
from config.settings import get_base_settings, get_dashboard_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DASHBOARD_STORE_BACKEND", "memory")
    get_base_settings.cache_clear()
    get_dashboard_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_dashboard_settings.cache_clear()


@pytest.mark.asyncio
async def test_lifespan_builds_dashboard_from_settings() -> None:
    app = create_app()

    async with lifespan(app):
        components = app.state.dashboard
        assert components is not None
        assert isinstance(components.store, MemoryAtendimentoStore)
        assert components.view.visible_atendimentos == []


@pytest.mark.asyncio
async def test_lifespan_keeps_injected_dashboard(settings) -> None:
    components = create_dashboard(store=MemoryAtendimentoStore(), settings=settings)
    app = create_app(dashboard=components)

    async with lifespan(app):
        assert app.state.dashboard is components


@pytest.mark.asyncio
async def test_lifespan_survives_unreadable_json_store(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "atendimentos.json"
    path.write_text("{corrompido", encoding="utf-8")
    monkeypatch.setenv("DASHBOARD_STORE_BACKEND", "json")
    monkeypatch.setenv("DASHBOARD_STORE_PATH", str(path))
    app = create_app()

    async with lifespan(app):
        assert app.state.dashboard.view.visible_atendimentos == []


@pytest.mark.asyncio
async def test_lifespan_tolerates_invalid_timezone_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_TIMEZONE", "Lua/Cratera")
    app = create_app()

    async with lifespan(app):
        assert str(app.state.dashboard.view.tz) == "America/Sao_Paulo"
