"""Process-local registry of the currently loaded tables.

Uploading replaces the whole set; nothing is written to disk.
"""
from __future__ import annotations

import threading
from typing import Iterable

from matchsight.domain.table import Table


class DatasetStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tables: dict[str, Table] = {}

    def replace_all(self, tables: Iterable[Table]) -> list[Table]:
        """Swap in *tables*, keyed by name; a repeated name keeps the last table."""
        fresh = {t.name: t for t in tables}
        with self._lock:
            self._tables = fresh
        return list(fresh.values())

    def get(self, name: str) -> Table | None:
        with self._lock:
            return self._tables.get(name)

    def list_all(self) -> list[Table]:
        with self._lock:
            return list(self._tables.values())

    def clear(self) -> None:
        with self._lock:
            self._tables = {}


_default_store = DatasetStore()


def get_default_store() -> DatasetStore:
    return _default_store
