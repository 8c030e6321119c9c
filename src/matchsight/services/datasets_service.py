"""Datasets use-case service. Owns Table -> DTO mapping; routers never see domain objects."""
from __future__ import annotations
import math
from typing import Any, Iterable, Mapping
from matchsight.domain.exceptions import NotFoundError
from matchsight.domain.table import Table, as_text
from matchsight.infra.dataset_store import DatasetStore
from matchsight.config import settings
from matchsight.ingest.csv_reader import FileError, parse_batch
from matchsight.api.schemas.datasets import (
    DatasetList, DatasetRead, FileErrorRead, UploadResponse,
)


def require_table(store: DatasetStore, name: str) -> Table:
    table = store.get(name)
    if table is None:
        raise NotFoundError(f"Dataset {name!r} not found")
    return table


def row_to_dict(row: Mapping[str, Any]) -> dict[str, Any]:
    """JSON-safe copy of a row; non-finite numbers become their text form."""
    return {
        key: as_text(value) if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in row.items()
    }


def dataset_read(table: Table) -> DatasetRead:
    return DatasetRead(name=table.name, columns=list(table.columns), row_count=table.row_count)


class DatasetsService:
    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def upload(self, files: Iterable[tuple[str, bytes]]) -> UploadResponse:
        """Parse every file and replace the loaded datasets with the ones that parsed."""
        accepted: list[tuple[str, bytes]] = []
        rejected: list[FileError] = []
        for name, content in files:
            if len(content) > settings.MAX_UPLOAD_BYTES:
                rejected.append(FileError(
                    file_name=name,
                    reason=f"File exceeds the {settings.MAX_UPLOAD_BYTES} byte upload limit.",
                ))
            else:
                accepted.append((name, content))

        batch = parse_batch(accepted)
        tables = self._store.replace_all(batch.tables)
        return UploadResponse(
            datasets=[dataset_read(t) for t in tables],
            errors=[
                FileErrorRead(file_name=e.file_name, reason=e.reason, message=e.message)
                for e in rejected + batch.errors
            ],
        )

    def list_datasets(self) -> DatasetList:
        tables = self._store.list_all()
        return DatasetList(items=[dataset_read(t) for t in tables], total=len(tables))

    def get_dataset(self, name: str) -> DatasetRead:
        return dataset_read(require_table(self._store, name))

    def reset(self) -> None:
        self._store.clear()
