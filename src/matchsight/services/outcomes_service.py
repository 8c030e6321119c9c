"""Outcome filter use-case service."""
from __future__ import annotations
from matchsight.config import settings
from matchsight.infra.dataset_store import DatasetStore
from matchsight.matching.outcome_filter import (
    OUTCOME_COLUMNS, OutcomeCategory, OutcomeThresholds,
    filter_outcomes, has_outcome_columns, predicted_result,
)
from matchsight.api.schemas.outcomes import OutcomePick, OutcomeResponse
from matchsight.services.datasets_service import require_table, row_to_dict

UNAVAILABLE_MESSAGE = (
    "Match outcome filters need the columns "
    + ", ".join(OUTCOME_COLUMNS[:-1]) + f", and {OUTCOME_COLUMNS[-1]}."
)


class OutcomesService:
    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def filter(
        self, name: str, sure_win: float | None = None, draw: float | None = None,
    ) -> OutcomeResponse:
        table = require_table(self._store, name)
        thresholds = OutcomeThresholds(
            sure_win=settings.SURE_WIN_THRESHOLD if sure_win is None else sure_win,
            draw=settings.DRAW_THRESHOLD if draw is None else draw,
        )

        if not has_outcome_columns(table):
            return OutcomeResponse(
                available=False,
                message=UNAVAILABLE_MESSAGE,
                sure_win_threshold=thresholds.sure_win,
                draw_threshold=thresholds.draw,
            )

        selection = filter_outcomes(table, thresholds)
        return OutcomeResponse(
            available=True,
            sure_win_threshold=thresholds.sure_win,
            draw_threshold=thresholds.draw,
            sure_wins=[
                OutcomePick(
                    predicted_result=predicted_result(row, OutcomeCategory.WIN),
                    row=row_to_dict(row),
                )
                for row in selection.sure_wins
            ],
            draws=[
                OutcomePick(
                    predicted_result=predicted_result(row, OutcomeCategory.DRAW),
                    row=row_to_dict(row),
                )
                for row in selection.draws
            ],
        )
