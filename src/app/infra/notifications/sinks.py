"""Implementações de NotificationSinkProtocol."""

from __future__ import annotations

import logging

from app.domain.dashboard import Notification
from app.protocols.notification_sink import NotificationSinkProtocol

logger = logging.getLogger(__name__)


class MemoryNotificationSink(NotificationSinkProtocol):
    """Acumula notificações até que a camada de apresentação as drene."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self._pending.append(notification)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Retorna e limpa as notificações pendentes."""
        drained, self._pending = self._pending, []
        return drained


class LoggingNotificationSink(NotificationSinkProtocol):
    """Registra notificações no log (uso em scripts e modo headless)."""

    def notify(self, notification: Notification) -> None:
        level = logging.ERROR if notification.kind == "error" else logging.INFO
        logger.log(
            level,
            "user_notification",
            extra={"kind": notification.kind, "title": notification.title},
        )
