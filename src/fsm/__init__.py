"""
Módulo FSM: exclusão de atendimentos em duas fases.

Estrutura:
    - states/: DeletionState (IDLE, STAGED)
    - transitions/: VALID_TRANSITIONS
    - manager/: StagedDeleteMachine
    - types/: StateTransition, TransitionResult
"""

from fsm.manager import StagedDeleteMachine
from fsm.states import DeletionState
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "VALID_TRANSITIONS",
    "DeletionState",
    "StagedDeleteMachine",
    "StateTransition",
    "TransitionResult",
    "get_valid_targets",
    "is_transition_valid",
    "validate_transition_map",
]
