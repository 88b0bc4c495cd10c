"""Store de atendimentos em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from app.domain.atendimento import Atendimento
from app.protocols.atendimento_store import AtendimentoStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Iterable


class MemoryAtendimentoStore(AtendimentoStoreProtocol):
    """Guarda registros serializados para isolar o chamador de mutações."""

    def __init__(self, records: Iterable[Atendimento] | None = None) -> None:
        self._data: str = "[]"
        self.write_count = 0
        if records is not None:
            self._data = self._serialize(list(records))

    @staticmethod
    def _serialize(records: list[Atendimento]) -> str:
        return json.dumps([record.to_record() for record in records])

    def list_all(self) -> list[Atendimento]:
        """Retorna cópias novas de todos os registros."""
        return [Atendimento.from_record(item) for item in json.loads(self._data)]

    def replace_all(self, records: list[Atendimento]) -> None:
        """Substitui o conteúdo inteiro."""
        self._data = self._serialize(records)
        self.write_count += 1
