"""Testes de edição e exclusão confirmada."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from app.infra.navigation import RecordingNavigator
from app.infra.notifications import MemoryNotificationSink
from app.infra.stores import MemoryAtendimentoStore
from app.protocols.navigator import EditorNavigatorProtocol
from app.services.dashboard_view import DashboardView
from app.services.mutation_coordinator import (
    DELETE_FAILED_NOTIFICATION,
    DELETED_NOTIFICATION,
    NOT_FOUND_NOTIFICATION,
    MutationCoordinator,
)
from fsm import DeletionState
from tests.fakes.fake_stores import FailingAtendimentoStore


@pytest.fixture
def records(make_atendimento):
    return [
        make_atendimento("a1", date="2026-10-21T09:00:00", amount="10.50"),
        make_atendimento("a2", date="2026-10-20T09:00:00", amount="5"),
        make_atendimento("t1", date="2026-10-21T09:00:00", amount="500", service="tarot-frequencial"),
    ]


def _build(store, settings, fixed_now, navigator=None):
    view = DashboardView(store, settings=settings, clock=lambda: fixed_now)
    view.load()
    notifier = MemoryNotificationSink()
    navigator = navigator or RecordingNavigator()
    coordinator = MutationCoordinator(store=store, view=view, notifier=notifier, navigator=navigator)
    return coordinator, view, notifier, navigator


class TestRequestEdit:
    def test_navigates_when_visible(self, records, settings, fixed_now) -> None:
        coordinator, _, notifier, navigator = _build(MemoryAtendimentoStore(records), settings, fixed_now)

        assert coordinator.request_edit("a1") is True
        assert navigator.last_target == "/editar-atendimento/a1"
        assert notifier.pending == []

    def test_missing_id_notifies_and_never_navigates(self, records, settings, fixed_now) -> None:
        navigator = MagicMock(spec=EditorNavigatorProtocol)
        coordinator, _, notifier, _ = _build(MemoryAtendimentoStore(records), settings, fixed_now, navigator)

        assert coordinator.request_edit("nao-existe") is False
        navigator.open_editor.assert_not_called()
        assert notifier.drain() == [NOT_FOUND_NOTIFICATION]

    def test_reserved_service_is_not_editable_here(self, records, settings, fixed_now) -> None:
        navigator = MagicMock(spec=EditorNavigatorProtocol)
        coordinator, _, notifier, _ = _build(MemoryAtendimentoStore(records), settings, fixed_now, navigator)

        assert coordinator.request_edit("t1") is False
        navigator.open_editor.assert_not_called()
        assert notifier.pending[0].kind == "error"

    def test_stale_view_after_external_delete(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, view, notifier, _ = _build(store, settings, fixed_now)
        store.replace_all([r for r in records if r.id != "a1"])
        view.load()

        assert coordinator.request_edit("a1") is False
        assert notifier.drain() == [NOT_FOUND_NOTIFICATION]


class TestDelete:
    def test_round_trip(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, view, notifier, _ = _build(store, settings, fixed_now)

        assert coordinator.request_delete("a1") is True
        assert coordinator.deletion_state is DeletionState.STAGED
        assert store.write_count == 0

        assert coordinator.confirm_delete() is True

        assert [r.id for r in store.list_all()] == ["a2", "t1"]
        assert [r.id for r in view.visible_atendimentos] == ["a2"]
        assert view.totals.count == 1
        assert view.totals.week_count == 1
        assert view.totals.period_amount == Decimal("5")
        assert coordinator.staged_id is None
        assert coordinator.deletion_state is DeletionState.IDLE
        assert notifier.drain() == [DELETED_NOTIFICATION]

    def test_delete_keeps_reserved_records_in_store(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, *_ = _build(store, settings, fixed_now)
        coordinator.request_delete("a2")
        coordinator.confirm_delete()
        assert "t1" in {r.id for r in store.list_all()}

    def test_restage_replaces_previous(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, *_ = _build(store, settings, fixed_now)

        coordinator.request_delete("a1")
        coordinator.request_delete("a2")
        coordinator.confirm_delete()

        assert [r.id for r in store.list_all()] == ["a1", "t1"]

    def test_cancel_then_confirm_is_noop(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, view, notifier, _ = _build(store, settings, fixed_now)

        coordinator.request_delete("a1")
        assert coordinator.cancel_delete() is True
        assert coordinator.confirm_delete() is False

        assert store.write_count == 0
        assert len(store.list_all()) == 3
        assert len(view.visible_atendimentos) == 2
        assert notifier.pending == []

    def test_cancel_when_idle(self, records, settings, fixed_now) -> None:
        coordinator, *_ = _build(MemoryAtendimentoStore(records), settings, fixed_now)
        assert coordinator.cancel_delete() is False

    def test_missing_id_is_noop_removal(self, records, settings, fixed_now) -> None:
        store = MemoryAtendimentoStore(records)
        coordinator, _, notifier, _ = _build(store, settings, fixed_now)

        coordinator.request_delete("fantasma")
        assert coordinator.confirm_delete() is True

        assert len(store.list_all()) == 3
        assert coordinator.staged_id is None
        assert notifier.drain() == [DELETED_NOTIFICATION]

    def test_write_failure_keeps_stage_and_reports_error(self, records, settings, fixed_now) -> None:
        store = FailingAtendimentoStore(records, fail_on="write")
        coordinator, view, notifier, _ = _build(store, settings, fixed_now)

        coordinator.request_delete("a1")
        assert coordinator.confirm_delete() is False

        assert coordinator.staged_id == "a1"
        assert [r.id for r in view.visible_atendimentos] == ["a1", "a2"]
        assert notifier.drain() == [DELETE_FAILED_NOTIFICATION]

        store.fail_on = None
        assert coordinator.confirm_delete() is True
        assert [r.id for r in store.list_all()] == ["a2", "t1"]

    def test_read_failure_reports_error(self, records, settings, fixed_now) -> None:
        store = FailingAtendimentoStore(records)
        coordinator, _, notifier, _ = _build(store, settings, fixed_now)
        store.fail_on = "read"

        coordinator.request_delete("a1")
        assert coordinator.confirm_delete() is False
        assert coordinator.deletion_state is DeletionState.STAGED
        assert notifier.drain() == [DELETE_FAILED_NOTIFICATION]

    def test_empty_id_is_not_staged(self, records, settings, fixed_now) -> None:
        coordinator, *_ = _build(MemoryAtendimentoStore(records), settings, fixed_now)
        assert coordinator.request_delete("") is False
        assert coordinator.deletion_state is DeletionState.IDLE
