"""Testes do store de atendimentos em arquivo JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from app.infra.stores.json_file_store import JsonFileAtendimentoStore
from utils.errors import StorePersistenceError, StoreReadError


class TestJsonFileAtendimentoStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert JsonFileAtendimentoStore(tmp_path / "nada.json").list_all() == []

    def test_blank_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "vazio.json"
        path.write_text("  \n", encoding="utf-8")
        assert JsonFileAtendimentoStore(path).list_all() == []

    def test_write_then_read(self, tmp_path: Path, make_atendimento) -> None:
        store = JsonFileAtendimentoStore(tmp_path / "sub" / "atendimentos.json")
        store.replace_all([make_atendimento("a1", amount="10.50"), make_atendimento("a2")])

        loaded = store.list_all()

        assert [r.id for r in loaded] == ["a1", "a2"]
        assert loaded[0].amount == "10.50"
        assert not list(store.path.parent.glob("*.tmp"))

    def test_file_uses_editor_keys_and_keeps_unknown_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "atendimentos.json"
        raw = [
            {
                "id": "a1",
                "nome": "Joana",
                "dataAtendimento": "2026-10-20",
                "tipoServico": "reiki",
                "valor": "80",
                "destino": "Lisboa",
                "extraDoEditor": [1, 2],
            }
        ]
        path.write_text(json.dumps(raw), encoding="utf-8")
        store = JsonFileAtendimentoStore(path)

        store.replace_all(store.list_all())

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved[0]["nome"] == "Joana"
        assert saved[0]["destino"] == "Lisboa"
        assert saved[0]["extraDoEditor"] == [1, 2]

    @pytest.mark.parametrize("content", ["{not json", '{"id": "a1"}', '[{"nome": "sem id"}]'])
    def test_unreadable_content_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "ruim.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(StoreReadError):
            JsonFileAtendimentoStore(path).list_all()

    def test_write_failure_raises_and_keeps_previous_file(
        self,
        tmp_path: Path,
        make_atendimento,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = tmp_path / "atendimentos.json"
        store = JsonFileAtendimentoStore(path)
        store.replace_all([make_atendimento("a1")])

        def _fail(*args: object, **kwargs: object) -> None:
            raise OSError("disco cheio")

        monkeypatch.setattr("app.infra.stores.json_file_store.os.replace", _fail)

        with pytest.raises(StorePersistenceError):
            store.replace_all([])

        assert [r.id for r in store.list_all()] == ["a1"]
        assert not list(tmp_path.glob("*.tmp"))
