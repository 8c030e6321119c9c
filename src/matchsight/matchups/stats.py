"""Summary figures over normalised matchup rows."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from matchsight.matchups.schema import MatchupRow

UNSPECIFIED = "Unspecified"


@dataclass(frozen=True, slots=True)
class ProbStats:
    min: float
    max: float
    average: float


@dataclass(frozen=True, slots=True)
class LambdaAverage:
    category: str
    home: float
    away: float


def prob_stats(rows: Sequence[MatchupRow]) -> ProbStats:
    if not rows:
        return ProbStats(min=0.0, max=1.0, average=0.0)
    probs = [r.prob_max for r in rows]
    return ProbStats(min=min(probs), max=max(probs), average=sum(probs) / len(probs))


def filter_by_probability(rows: Sequence[MatchupRow], prob_min: float) -> list[MatchupRow]:
    return [r for r in rows if r.prob_max >= prob_min]


def predicted_distribution(rows: Sequence[MatchupRow]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for r in rows:
        key = r.predicted or UNSPECIFIED
        counts[key] = counts.get(key, 0) + 1
    return counts


def lambda_averages(rows: Sequence[MatchupRow]) -> list[LambdaAverage]:
    totals: dict[str, list[float]] = {}
    for r in rows:
        bucket = totals.setdefault(r.predicted or UNSPECIFIED, [0.0, 0.0, 0])
        bucket[0] += r.lambda_home
        bucket[1] += r.lambda_away
        bucket[2] += 1
    return [
        LambdaAverage(category=category, home=home / count, away=away / count)
        for category, (home, away, count) in totals.items()
    ]


def highlight_match(rows: Sequence[MatchupRow]) -> MatchupRow | None:
    """Row with the highest ``prob_max``; the earliest wins ties."""
    best = None
    for r in rows:
        if best is None or r.prob_max > best.prob_max:
            best = r
    return best
