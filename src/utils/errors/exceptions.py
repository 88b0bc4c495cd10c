"""Exceções do painel: domínio recuperável e falhas de infraestrutura."""

from __future__ import annotations


class DashboardError(Exception):
    """Base para erros de domínio tratados localmente pelo painel."""


class AtendimentoNotFoundError(DashboardError, LookupError):
    """Atendimento ausente da lista visível (ex: tela desatualizada)."""

    def __init__(self, atendimento_id: str) -> None:
        super().__init__(f"Atendimento não encontrado: {atendimento_id}")
        self.atendimento_id = atendimento_id


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class StoreError(InfrastructureError):
    """Falha ao acessar o store de atendimentos."""


class StoreReadError(StoreError):
    """Leitura do store falhou ou devolveu conteúdo ilegível."""


class StorePersistenceError(StoreError):
    """Gravação do store falhou; nada deve ser dado como persistido."""
