"""Logging estruturado do painel de atendimentos.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no composition root (app/bootstrap/)
    configure_logging(level="INFO", service_name="painel_atendimentos")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("atendimento_deleted", extra={"atendimento_id": "a1"})

Todo registro sai em JSON com: asctime, level, logger, message,
correlation_id e service. Nunca logar nome de cliente ou valores livres.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
