"""Destinos de notificação do painel."""

from app.infra.notifications.sinks import LoggingNotificationSink, MemoryNotificationSink

__all__ = ["LoggingNotificationSink", "MemoryNotificationSink"]
