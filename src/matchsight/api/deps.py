"""FastAPI dependencies."""
from __future__ import annotations
from matchsight.infra.dataset_store import DatasetStore, get_default_store


def get_store() -> DatasetStore:
    """The process-wide dataset registry; tests override this dependency."""
    return get_default_store()
