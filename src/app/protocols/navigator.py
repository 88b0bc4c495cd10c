"""Contrato de navegação para o editor externo de atendimentos."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EditorNavigatorProtocol(ABC):
    """Abre o fluxo de edição para um atendimento existente."""

    @abstractmethod
    def open_editor(self, atendimento_id: str) -> None: ...
