"""Header resolution for the team-matchup view.

Headers are compared after normalisation (lowercase, whitespace and hyphen
runs collapsed to ``_``), against each logical field name and its aliases.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from matchsight.domain.exceptions import SchemaResolutionError
from matchsight.domain.table import Row, Table, as_number, as_text

TEAM = "Team"
OPPONENT = "Opponent"
PREDICTED = "Predicted"
PROB_MAX = "Prob_Max"
LAMBDA_HOME = "Lambda_Home"
LAMBDA_AWAY = "Lambda_Away"
DATE = "Date"
DIVISION = "Division"

REQUIRED_FIELDS = (TEAM, OPPONENT, PREDICTED, PROB_MAX, LAMBDA_HOME, LAMBDA_AWAY)
OPTIONAL_FIELDS = (DATE, DIVISION)

COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    TEAM: ("Home", "HomeTeam"),
    OPPONENT: ("Away", "AwayTeam"),
    PREDICTED: ("Prediction", "Predicted Score"),
    PROB_MAX: ("Prob Max", "probability_max"),
    LAMBDA_HOME: ("Lambda Home", "lambda-home"),
    LAMBDA_AWAY: ("Lambda Away", "lambda-away"),
    DATE: ("Match Date", "Kickoff"),
    DIVISION: ("Div", "League"),
}

_SEPARATORS = re.compile(r"[\s-]+")


def normalize_header(value: str) -> str:
    return _SEPARATORS.sub("_", value.strip()).lower()


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Logical field -> actual header in the uploaded file."""

    team: str
    opponent: str
    predicted: str
    prob_max: str
    lambda_home: str
    lambda_away: str
    date: str | None = None
    division: str | None = None


@dataclass(frozen=True, slots=True)
class MatchupRow:
    team: str
    opponent: str
    predicted: str
    prob_max: float
    lambda_home: float
    lambda_away: float
    date: str = ""
    division: str = ""


def _find_header(headers: Sequence[str], field_name: str) -> str | None:
    candidates = {normalize_header(c) for c in (field_name, *COLUMN_ALIASES.get(field_name, ()))}
    return next((h for h in headers if normalize_header(h) in candidates), None)


def resolve_columns(headers: Sequence[str]) -> ColumnMap:
    """Map every required field to a header.

    Raises:
        SchemaResolutionError: naming the first required field with no match.
    """
    resolved: dict[str, str | None] = {}
    for field_name in REQUIRED_FIELDS:
        header = _find_header(headers, field_name)
        if header is None:
            raise SchemaResolutionError(field_name)
        resolved[field_name] = header
    for field_name in OPTIONAL_FIELDS:
        resolved[field_name] = _find_header(headers, field_name)

    return ColumnMap(
        team=resolved[TEAM],
        opponent=resolved[OPPONENT],
        predicted=resolved[PREDICTED],
        prob_max=resolved[PROB_MAX],
        lambda_home=resolved[LAMBDA_HOME],
        lambda_away=resolved[LAMBDA_AWAY],
        date=resolved[DATE],
        division=resolved[DIVISION],
    )


def _matchup_row(row: Row, columns: ColumnMap) -> MatchupRow:
    # Only an absent key reads as Unknown; blank cells stay blank.
    predicted = row.get(columns.predicted)
    return MatchupRow(
        team=as_text(row.get(columns.team)),
        opponent=as_text(row.get(columns.opponent)),
        predicted="Unknown" if predicted is None else as_text(predicted),
        prob_max=as_number(row.get(columns.prob_max), 0.0),
        lambda_home=as_number(row.get(columns.lambda_home), 0.0),
        lambda_away=as_number(row.get(columns.lambda_away), 0.0),
        date=as_text(row.get(columns.date)) if columns.date else "",
        division=as_text(row.get(columns.division)) if columns.division else "",
    )


def load_matchups(table: Table) -> list[MatchupRow]:
    columns = resolve_columns(table.columns)
    return [_matchup_row(row, columns) for row in table.rows]


def matchup_rule_rows(rows: Sequence[MatchupRow]) -> list[dict[str, object]]:
    """Plain mappings keyed by logical field name, as the rule matcher reads them."""
    return [
        {
            TEAM: r.team,
            OPPONENT: r.opponent,
            PREDICTED: r.predicted,
            PROB_MAX: r.prob_max,
            LAMBDA_HOME: r.lambda_home,
            LAMBDA_AWAY: r.lambda_away,
            DATE: r.date,
            DIVISION: r.division,
        }
        for r in rows
    ]
