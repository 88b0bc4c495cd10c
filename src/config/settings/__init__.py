"""Agregador de settings do painel de atendimentos."""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.dashboard import (
    RESERVED_SERVICE_TYPE,
    DashboardSettings,
    StoreBackend,
    get_dashboard_settings,
)

__all__ = [
    "RESERVED_SERVICE_TYPE",
    "BaseSettings",
    "DashboardSettings",
    "Environment",
    "StoreBackend",
    "get_base_settings",
    "get_dashboard_settings",
]
