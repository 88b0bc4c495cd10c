"""
Grafo de transições da exclusão em duas fases.

STAGED → STAGED é permitido: marcar outro atendimento substitui o anterior.
IDLE → IDLE não é transição; confirmar ou cancelar sem nada marcado é no-op.
"""

from fsm.states.deletion import DeletionState

TransitionMap = dict[DeletionState, frozenset[DeletionState]]

VALID_TRANSITIONS: TransitionMap = {
    DeletionState.IDLE: frozenset({DeletionState.STAGED}),
    DeletionState.STAGED: frozenset({
        DeletionState.STAGED,
        DeletionState.IDLE,
    }),
}


def get_valid_targets(state: DeletionState) -> frozenset[DeletionState]:
    """Retorna os estados de destino permitidos a partir de `state`."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: DeletionState, to_state: DeletionState) -> bool:
    """Verifica se a transição pertence ao grafo."""
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in DeletionState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")
        elif not VALID_TRANSITIONS[state]:
            errors.append(f"Estado {state.name} sem saída")

    for from_state, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, DeletionState):
                errors.append(f"Transição {from_state.name} → {target}: destino inválido")

    return errors
