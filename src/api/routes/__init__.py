"""Rotas HTTP: health checks e painel de atendimentos.

- routes/health/: liveness e readiness
- routes/dashboard/: cards, período, edição e exclusão em duas fases
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
