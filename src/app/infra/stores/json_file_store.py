"""Store de atendimentos em arquivo JSON (array de registros).

Gravação atômica: escreve em arquivo temporário no mesmo diretório e
troca com `os.replace`, de modo que leitores nunca veem arquivo parcial.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from app.domain.atendimento import Atendimento
from app.protocols.atendimento_store import AtendimentoStoreProtocol
from utils.errors import StorePersistenceError, StoreReadError

logger = logging.getLogger(__name__)


class JsonFileAtendimentoStore(AtendimentoStoreProtocol):
    """Store persistente em um único arquivo JSON."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def list_all(self) -> list[Atendimento]:
        """Lê o arquivo inteiro; arquivo ausente equivale a store vazio.

        Raises:
            StoreReadError: Arquivo ilegível, JSON inválido ou registro inválido.
        """
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning(
                "atendimento_store_read_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise StoreReadError(f"Falha ao ler {self._path}") from exc

        if not raw.strip():
            return []

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreReadError(f"JSON inválido em {self._path}") from exc

        if not isinstance(payload, list):
            raise StoreReadError(f"Conteúdo de {self._path} não é uma lista")

        try:
            return [Atendimento.from_record(item) for item in payload]
        except ValidationError as exc:
            raise StoreReadError(
                f"Registro inválido em {self._path}: {exc.error_count()} erro(s)"
            ) from exc

    def replace_all(self, records: list[Atendimento]) -> None:
        """Grava todos os registros de forma atômica.

        Raises:
            StorePersistenceError: Falha de I/O; o arquivo anterior é mantido.
        """
        content = json.dumps(
            [record.to_record() for record in records],
            ensure_ascii=False,
            indent=2,
        )
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.warning(
                "atendimento_store_write_failed",
                extra={"error_type": type(exc).__name__, "record_count": len(records)},
            )
            raise StorePersistenceError(f"Falha ao gravar {self._path}") from exc

        logger.debug("atendimento_store_written", extra={"record_count": len(records)})
