"""Edição e exclusão de atendimentos a partir do painel.

Exclusão em duas fases: `request_delete` apenas marca o id;
`confirm_delete` remove do store, regrava, reconstrói o painel e notifica.
Falhas terminam sempre em no-op ou notificação, nunca em exceção.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.dashboard import Notification
from config.logging import get_logger
from fsm import DeletionState, StagedDeleteMachine
from utils.errors import AtendimentoNotFoundError, StoreError

if TYPE_CHECKING:
    from app.protocols.atendimento_store import AtendimentoStoreProtocol
    from app.protocols.navigator import EditorNavigatorProtocol
    from app.protocols.notification_sink import NotificationSinkProtocol
    from app.services.dashboard_view import DashboardView

logger = get_logger(__name__)

NOT_FOUND_NOTIFICATION = Notification(
    kind="error",
    title="Erro",
    message="Atendimento não encontrado.",
)
DELETED_NOTIFICATION = Notification(
    kind="success",
    title="Atendimento excluído",
    message="O atendimento foi excluído com sucesso.",
)
DELETE_FAILED_NOTIFICATION = Notification(
    kind="error",
    title="Erro",
    message="Não foi possível excluir o atendimento.",
)


class MutationCoordinator:
    """Mantém o painel consistente com o store após cada mutação."""

    def __init__(
        self,
        store: AtendimentoStoreProtocol,
        view: DashboardView,
        notifier: NotificationSinkProtocol,
        navigator: EditorNavigatorProtocol,
    ) -> None:
        self._store = store
        self._view = view
        self._notifier = notifier
        self._navigator = navigator
        self._deletion = StagedDeleteMachine()

    @property
    def staged_id(self) -> str | None:
        return self._deletion.staged_id

    @property
    def deletion_state(self) -> DeletionState:
        return self._deletion.current_state

    def request_edit(self, atendimento_id: str) -> bool:
        """Abre o editor se o atendimento estiver na lista visível.

        Returns:
            True se a navegação foi disparada.
        """
        try:
            self._view.get_visible(atendimento_id)
        except AtendimentoNotFoundError as exc:
            logger.warning(
                "atendimento_edit_not_found",
                extra={"atendimento_id": exc.atendimento_id},
            )
            self._notifier.notify(NOT_FOUND_NOTIFICATION)
            return False

        self._navigator.open_editor(atendimento_id)
        logger.info("atendimento_edit_opened", extra={"atendimento_id": atendimento_id})
        return True

    def request_delete(self, atendimento_id: str) -> bool:
        """Marca o atendimento para exclusão, substituindo marcação anterior."""
        result = self._deletion.stage(atendimento_id)
        if not result.success:
            logger.info("atendimento_delete_stage_rejected", extra={"reason": result.error_reason})
            return False
        logger.info("atendimento_delete_staged", extra=result.transition.to_log_dict())
        return True

    def cancel_delete(self) -> bool:
        """Desmarca sem tocar no store. Sem marcação é no-op."""
        result = self._deletion.clear("cancel")
        if result.success:
            logger.info("atendimento_delete_cancelled", extra=result.transition.to_log_dict())
        return result.success

    def confirm_delete(self) -> bool:
        """Executa a exclusão marcada.

        Em falha do store a marcação é mantida, nada é dado como excluído e
        o usuário recebe notificação de erro.

        Returns:
            True se a exclusão foi persistida.
        """
        staged_id = self._deletion.staged_id
        if staged_id is None:
            logger.debug("atendimento_delete_confirm_ignored", extra={"reason": "nothing_staged"})
            return False

        try:
            records = self._store.list_all()
            remaining = [record for record in records if record.id != staged_id]
            self._store.replace_all(remaining)
        except StoreError as exc:
            logger.error(
                "atendimento_delete_failed",
                extra={"atendimento_id": staged_id, "error_type": type(exc).__name__},
            )
            self._notifier.notify(DELETE_FAILED_NOTIFICATION)
            return False

        self._view.refresh(remaining)
        result = self._deletion.clear("confirm")
        logger.info(
            "atendimento_deleted",
            extra={
                **result.transition.to_log_dict(),
                "removed": len(records) - len(remaining),
            },
        )
        self._notifier.notify(DELETED_NOTIFICATION)
        return True
