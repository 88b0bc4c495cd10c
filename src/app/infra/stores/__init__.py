"""Implementações do store de atendimentos."""

from app.infra.stores.json_file_store import JsonFileAtendimentoStore
from app.infra.stores.memory_stores import MemoryAtendimentoStore

__all__ = ["JsonFileAtendimentoStore", "MemoryAtendimentoStore"]
