"""Configuração centralizada de logging JSON."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "painel_atendimentos"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Chamada uma vez pelo bootstrap. Chamadas repetidas substituem o handler
    anterior em vez de acumular saídas duplicadas.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            sem diferenciar maiúsculas.
        service_name: Valor do campo `service` em todos os registros.
        correlation_id_getter: Função que devolve o correlation_id da
            requisição corrente (ex: `app.observability.get_correlation_id`).

    Raises:
        ValueError: Se o nível não for reconhecido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (geralmente `__name__`)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    value: str | None = None,
) -> None:
    """Registra que um valor padrão determinístico foi aplicado.

    Usado quando uma entrada inválida é degradada em silêncio para manter
    o painel renderizável (ex: período desconhecido vira "week").

    Args:
        logger: Logger do módulo chamador.
        component: Componente que aplicou o fallback (ex: "period_resolver").
        reason: Motivo curto, sem PII (ex: "unknown_period").
        value: Valor adotado no lugar da entrada inválida.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if value is not None:
        extra["fallback_value"] = value

    logger.info("Fallback applied for %s", component, extra=extra)
