"""Analysis use-case service."""
from __future__ import annotations
from matchsight.analysis.engine import AnalysisResult, analyze
from matchsight.domain.table import Table
from matchsight.infra.dataset_store import DatasetStore
from matchsight.api.schemas.analysis import (
    AnalysisResponse, ChartKindDTO, ChartSuggestionRead, ColumnProfileRead, ColumnTypeDTO,
)
from matchsight.services.datasets_service import require_table


def analysis_response(result: AnalysisResult) -> AnalysisResponse:
    return AnalysisResponse(
        summary=result.summary,
        insights=list(result.insights),
        chart_suggestions=[
            ChartSuggestionRead(
                kind=ChartKindDTO(s.kind.value),
                title=s.title,
                description=s.description,
                column=s.column,
                x_column=s.x_column,
                y_column=s.y_column,
            )
            for s in result.chart_suggestions
        ],
        profiles=[
            ColumnProfileRead(name=p.name, type=ColumnTypeDTO(p.type.value), unique_count=p.unique_count)
            for p in result.profiles
        ],
    )


class AnalysisService:
    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def analyze(self, name: str) -> AnalysisResponse:
        return self.analyze_table(require_table(self._store, name))

    @staticmethod
    def analyze_table(table: Table) -> AnalysisResponse:
        return analysis_response(analyze(table))
