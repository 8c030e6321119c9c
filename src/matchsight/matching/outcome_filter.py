"""Sure-win and draw selection over home/draw/away probability columns."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from matchsight.config import settings
from matchsight.domain.exceptions import MissingColumnsError
from matchsight.domain.table import Row, Table, as_number

HOME_WIN = "Prob_HomeWin"
DRAW = "Prob_Draw"
AWAY_WIN = "Prob_AwayWin"
OUTCOME_COLUMNS = (HOME_WIN, DRAW, AWAY_WIN)

OUTCOME_DISPLAY_COLUMNS = ("Date", "Team", "Opponent", HOME_WIN, DRAW, AWAY_WIN)


class OutcomeCategory(str, Enum):
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class OutcomeThresholds:
    sure_win: float = field(default_factory=lambda: settings.SURE_WIN_THRESHOLD)
    draw: float = field(default_factory=lambda: settings.DRAW_THRESHOLD)

    def __post_init__(self) -> None:
        for name in ("sure_win", "draw"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} threshold must be within [0, 1], got {value}")


@dataclass(frozen=True, slots=True)
class OutcomeSelection:
    sure_wins: tuple[Row, ...] = ()
    draws: tuple[Row, ...] = ()


def has_outcome_columns(table: Table) -> bool:
    return table.has_columns(*OUTCOME_COLUMNS)


def _prob(row: Row, column: str) -> float:
    return as_number(row.get(column), 0.0)


def is_sure_win(row: Row, threshold: float) -> bool:
    return _prob(row, HOME_WIN) >= threshold or _prob(row, AWAY_WIN) >= threshold


def is_draw(row: Row, threshold: float) -> bool:
    return _prob(row, DRAW) >= threshold


def filter_outcomes(table: Table, thresholds: OutcomeThresholds) -> OutcomeSelection:
    """Split *table* rows into high-confidence wins and likely draws.

    The two lists are independent; a row can appear in both. Callers check
    ``has_outcome_columns`` first.
    """
    missing = table.missing_columns(OUTCOME_COLUMNS)
    if missing:
        raise MissingColumnsError(missing)

    return OutcomeSelection(
        sure_wins=tuple(row for row in table.rows if is_sure_win(row, thresholds.sure_win)),
        draws=tuple(row for row in table.rows if is_draw(row, thresholds.draw)),
    )


def predicted_result(row: Row, category: OutcomeCategory) -> str:
    if category is OutcomeCategory.DRAW:
        return "Draw"
    if _prob(row, HOME_WIN) >= _prob(row, AWAY_WIN):
        return "Home Win"
    return "Away Win"
