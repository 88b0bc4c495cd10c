"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AtendimentoNotFoundError,
    DashboardError,
    InfrastructureError,
    StoreError,
    StorePersistenceError,
    StoreReadError,
)

__all__ = [
    "AtendimentoNotFoundError",
    "DashboardError",
    "InfrastructureError",
    "StoreError",
    "StorePersistenceError",
    "StoreReadError",
]
