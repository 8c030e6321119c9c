"""Team-matchup use-case service."""
from __future__ import annotations
from matchsight.infra.dataset_store import DatasetStore
from matchsight.matchups.schema import load_matchups
from matchsight.matchups.stats import (
    filter_by_probability, highlight_match, lambda_averages,
    predicted_distribution, prob_stats,
)
from matchsight.api.schemas.matchups import (
    LambdaAverageRead, MatchupResponse, MatchupRowRead, ProbStatsRead,
)
from matchsight.services.datasets_service import require_table


class MatchupsService:
    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def summarize(self, name: str, prob_min: float | None = None) -> MatchupResponse:
        """Resolve the matchup schema and summarise rows at or above *prob_min*.

        Without *prob_min* the filter starts at the lowest probability in the
        file, so every row is kept.
        """
        table = require_table(self._store, name)
        rows = load_matchups(table)
        stats = prob_stats(rows)
        threshold = stats.min if prob_min is None else prob_min
        kept = filter_by_probability(rows, threshold)
        best = highlight_match(kept)

        return MatchupResponse(
            total=len(rows),
            prob_min=threshold,
            stats=ProbStatsRead.model_validate(stats),
            rows=[MatchupRowRead.model_validate(r) for r in kept],
            distribution=predicted_distribution(kept),
            lambda_averages=[LambdaAverageRead.model_validate(a) for a in lambda_averages(kept)],
            highlight=MatchupRowRead.model_validate(best) if best else None,
        )
