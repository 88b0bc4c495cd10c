"""Protocolos dos colaboradores externos do painel."""

from .atendimento_store import AtendimentoStoreProtocol
from .navigator import EditorNavigatorProtocol
from .notification_sink import NotificationSinkProtocol

__all__ = [
    "AtendimentoStoreProtocol",
    "EditorNavigatorProtocol",
    "NotificationSinkProtocol",
]
