"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import StagedDeleteMachine

__all__ = ["StagedDeleteMachine"]
