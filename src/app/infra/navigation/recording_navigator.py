"""Navigator que apenas registra o destino de edição.

A API HTTP devolve esse destino ao cliente, que faz o redirecionamento.
"""

from __future__ import annotations

from app.protocols.navigator import EditorNavigatorProtocol

EDITOR_PATH_TEMPLATE = "/editar-atendimento/{atendimento_id}"


class RecordingNavigator(EditorNavigatorProtocol):
    """Guarda o último caminho de editor solicitado."""

    def __init__(self) -> None:
        self.last_target: str | None = None

    def open_editor(self, atendimento_id: str) -> None:
        self.last_target = EDITOR_PATH_TEMPLATE.format(atendimento_id=atendimento_id)

    def consume(self) -> str | None:
        """Retorna e limpa o último destino."""
        target, self.last_target = self.last_target, None
        return target
