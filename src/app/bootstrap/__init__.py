"""Bootstrap do painel: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas (store, notificações, navegação) aos serviços.

Uso:
    from app.bootstrap import create_dashboard, initialize_app

    initialize_app()
    dashboard = create_dashboard()
"""

from __future__ import annotations

from app.bootstrap.dashboard_factory import DashboardComponents, create_dashboard
from app.bootstrap.dependencies import create_atendimento_store
from app.observability import get_correlation_id
from config.logging import configure_logging, get_logger
from config.settings import get_base_settings, get_dashboard_settings

SERVICE_NAME = "painel_atendimentos"

logger = get_logger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` só registra
    o problema e segue.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"dashboard: {error}" for error in get_dashboard_settings().validate_settings())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "DashboardComponents",
    "create_atendimento_store",
    "create_dashboard",
    "initialize_app",
    "validate_runtime_settings",
]
