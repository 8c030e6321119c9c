"""Dataset DTOs. Pure Pydantic, no domain imports."""
from __future__ import annotations
from pydantic import BaseModel


class DatasetRead(BaseModel):
    name: str
    columns: list[str]
    row_count: int


class DatasetList(BaseModel):
    items: list[DatasetRead]
    total: int


class FileErrorRead(BaseModel):
    file_name: str
    reason: str
    message: str


class UploadResponse(BaseModel):
    datasets: list[DatasetRead]
    errors: list[FileErrorRead]
