"""Contrato do destino de notificações ao usuário."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.dashboard import Notification


class NotificationSinkProtocol(ABC):
    """Recebe notificações de sucesso/erro emitidas pelo painel."""

    @abstractmethod
    def notify(self, notification: Notification) -> None: ...
