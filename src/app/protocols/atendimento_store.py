"""Contrato do store de atendimentos (fonte única da verdade)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.atendimento import Atendimento


class AtendimentoStoreProtocol(ABC):
    """Store síncrono com leitura completa e substituição completa.

    Implementações devem levantar `StoreError` (ou subclasse) em falhas de
    I/O; o painel nunca assume sucesso de gravação.
    """

    @abstractmethod
    def list_all(self) -> list[Atendimento]:
        """Retorna todos os registros, sem filtro de escopo."""

    @abstractmethod
    def replace_all(self, records: list[Atendimento]) -> None:
        """Substitui o conteúdo inteiro do store (idempotente)."""
