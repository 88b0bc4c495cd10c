"""Navegação para o editor externo."""

from app.infra.navigation.recording_navigator import EDITOR_PATH_TEMPLATE, RecordingNavigator

__all__ = ["EDITOR_PATH_TEMPLATE", "RecordingNavigator"]
