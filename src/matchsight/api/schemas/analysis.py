"""Analysis DTOs. Pure Pydantic, no domain imports."""
from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class ColumnTypeDTO(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    CATEGORICAL = "categorical"


class ChartKindDTO(str, Enum):
    BAR = "bar"
    PIE = "pie"
    LINE = "line"
    SCATTER = "scatter"


class ColumnProfileRead(BaseModel):
    name: str
    type: ColumnTypeDTO
    unique_count: int


class ChartSuggestionRead(BaseModel):
    kind: ChartKindDTO
    title: str
    description: str
    column: str | None = None
    x_column: str | None = None
    y_column: str | None = None


class AnalysisResponse(BaseModel):
    summary: str
    insights: list[str]
    chart_suggestions: list[ChartSuggestionRead]
    profiles: list[ColumnProfileRead]
