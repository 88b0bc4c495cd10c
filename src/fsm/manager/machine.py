"""
Máquina de estados da exclusão em duas fases.

O único dado guardado é o id marcado (ou None); o estado é derivado dele,
então IDLE/STAGED e o id nunca divergem.
"""

from typing import Any

from fsm.states.deletion import DeletionState
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class StagedDeleteMachine:
    """
    Guarda no máximo um atendimento aguardando confirmação de exclusão.

    Attributes:
        staged_id: Id marcado para exclusão, ou None
        current_state: IDLE ou STAGED, derivado de staged_id
        history: Transições realizadas, para auditoria
    """

    __slots__ = ("_history", "_staged_id")

    def __init__(self) -> None:
        self._staged_id: str | None = None
        self._history: list[StateTransition] = []

    @property
    def staged_id(self) -> str | None:
        return self._staged_id

    @property
    def current_state(self) -> DeletionState:
        if self._staged_id is None:
            return DeletionState.IDLE
        return DeletionState.STAGED

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    def get_valid_targets(self) -> frozenset[DeletionState]:
        return get_valid_targets(self.current_state)

    def stage(self, atendimento_id: str) -> TransitionResult:
        """
        Marca um atendimento, substituindo qualquer marcação anterior.

        Args:
            atendimento_id: Id do atendimento a excluir

        Returns:
            TransitionResult; falha apenas para id vazio
        """
        if not atendimento_id:
            return TransitionResult(success=False, error_reason="Id de atendimento vazio")
        return self._apply(DeletionState.STAGED, "stage", atendimento_id)

    def clear(self, trigger: str) -> TransitionResult:
        """
        Volta a IDLE após confirmação ou cancelamento.

        Args:
            trigger: 'confirm' ou 'cancel'

        Returns:
            TransitionResult; falha se não havia nada marcado
        """
        return self._apply(DeletionState.IDLE, trigger, None)

    def _apply(
        self,
        target: DeletionState,
        trigger: str,
        atendimento_id: str | None,
    ) -> TransitionResult:
        current = self.current_state
        if not is_transition_valid(current, target):
            return TransitionResult(
                success=False,
                error_reason=f"Transição inválida: {current.name} → {target.name}",
            )

        transition = StateTransition(
            from_state=current,
            to_state=target,
            trigger=trigger,
            atendimento_id=atendimento_id if atendimento_id is not None else self._staged_id,
        )
        self._staged_id = atendimento_id
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo seguro para logs."""
        return {
            "current_state": self.current_state.name,
            "staged_id": self._staged_id,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }
