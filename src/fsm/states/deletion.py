"""
Estados da exclusão confirmada de um atendimento.

A exclusão tem duas fases: o usuário marca um atendimento (STAGED) e só
então confirma ou cancela, voltando a IDLE. Não existe estado terminal.
"""

from enum import StrEnum


class DeletionState(StrEnum):
    """
    Estados da exclusão em duas fases.

    - IDLE: nenhum atendimento aguardando confirmação
    - STAGED: exatamente um atendimento aguardando confirmação
    """

    IDLE = "IDLE"
    STAGED = "STAGED"

    def __str__(self) -> str:
        return self.value
