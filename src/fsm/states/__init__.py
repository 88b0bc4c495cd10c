"""Exports públicos do módulo fsm/states."""

from fsm.states.deletion import DeletionState

__all__ = ["DeletionState"]
