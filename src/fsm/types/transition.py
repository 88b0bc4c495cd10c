"""
Registros imutáveis das transições da exclusão em duas fases.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.deletion import DeletionState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Uma mudança de estado da exclusão.

    Attributes:
        from_state: Estado de origem
        to_state: Estado de destino
        trigger: Ação que causou a transição ('stage', 'confirm', 'cancel')
        atendimento_id: Atendimento marcado no momento da transição
        timestamp: Momento da transição (UTC)
    """

    from_state: DeletionState
    to_state: DeletionState
    trigger: str
    atendimento_id: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação para logs estruturados (apenas ids, sem PII)."""
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "atendimento_id": self.atendimento_id,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aplicada
        transition: Registro da transição (se success=True)
        error_reason: Motivo da recusa (se success=False)
    """

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
