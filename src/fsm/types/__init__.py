"""
Exports públicos do módulo fsm/types.

Registros de transição da exclusão em duas fases.
"""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
