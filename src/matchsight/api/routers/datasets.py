"""Datasets router."""
from fastapi import APIRouter, Depends, UploadFile
from matchsight.api.deps import get_store
from matchsight.api.schemas.datasets import DatasetList, DatasetRead, UploadResponse
from matchsight.infra.dataset_store import DatasetStore
from matchsight.services.datasets_service import DatasetsService

router = APIRouter(prefix="/datasets", tags=["datasets"])


@router.post("", response_model=UploadResponse, status_code=201)
async def upload_datasets(
    files: list[UploadFile],
    store: DatasetStore = Depends(get_store),
) -> UploadResponse:
    payload = [(f.filename or "upload.csv", await f.read()) for f in files]
    return DatasetsService(store).upload(payload)


@router.get("", response_model=DatasetList)
def list_datasets(store: DatasetStore = Depends(get_store)) -> DatasetList:
    return DatasetsService(store).list_datasets()


@router.delete("", status_code=204)
def reset_datasets(store: DatasetStore = Depends(get_store)) -> None:
    DatasetsService(store).reset()


@router.get("/{name}", response_model=DatasetRead)
def get_dataset(name: str, store: DatasetStore = Depends(get_store)) -> DatasetRead:
    return DatasetsService(store).get_dataset(name)
