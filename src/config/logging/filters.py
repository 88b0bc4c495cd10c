"""Filter que injeta contexto da requisição em cada registro de log.

Campos injetados:
- correlation_id: valor do header x-correlation-id (ou gerado no middleware)
- service: nome do serviço configurado em SERVICE_NAME
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece registros com `service` e `correlation_id`.

    Args:
        service_name: Nome gravado no campo `service`.
        correlation_id_getter: Lê o correlation_id do contexto atual
            (em produção, `app.observability.get_correlation_id`). Sem
            getter, registros sem `extra` saem com string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Preenche os campos de contexto do record.

        Args:
            record: Registro a enriquecer.

        Returns:
            Sempre True; o filter não descarta registros.
        """
        # correlation_id explícito em `extra` vence o do contexto
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
