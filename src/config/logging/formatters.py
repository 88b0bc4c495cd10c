"""Formatter JSON do painel.

Todo registro sai com o mesmo conjunto de campos:
- asctime, level, logger, message
- correlation_id e service (injetados pelo CorrelationIdFilter)

Campos de `extra` (ids, contagens, motivo de fallback) são anexados ao
lado dos obrigatórios. Nunca registrar nome de cliente ou observações.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# levelname/name saem como level/logger
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado pelo handler raiz.

    A ordem dos campos no format string é estável (ordenada), o que mantém
    a saída comparável entre execuções.

    Returns:
        JsonFormatter com REQUIRED_LOG_FIELDS e FIELD_RENAME_MAP aplicados.

    Exemplo de saída:
        {"asctime": "2026-10-19 10:30:00,120", "level": "INFO",
         "logger": "app.services.mutation_coordinator",
         "message": "atendimento_deleted", "correlation_id": "c0ffee",
         "service": "painel_atendimentos", "atendimento_id": "a1"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
