"""Column type inference from a small sample of values."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from dateutil import parser as dtparser

from matchsight.config import settings
from matchsight.domain.table import Table, as_number, as_text, is_blank, is_number

# Largest magnitude accepted as an epoch-millisecond timestamp.
_MAX_TIMESTAMP_MS = 8.64e15

# dateutil fills missing date parts from its default; a value that resolves to
# the same day under both defaults names its own year, month and day.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    CATEGORICAL = "categorical"


@dataclass(frozen=True, slots=True)
class ColumnProfile:
    name: str
    type: ColumnType
    unique_count: int


def column_sample(table: Table, column: str, size: int | None = None) -> list[Any]:
    """Non-blank values among the first *size* rows of *column*."""
    size = settings.SAMPLE_SIZE if size is None else size
    values = (row.get(column) for row in table.rows[:size])
    return [v for v in values if not is_blank(v)]


def _parses_as_date(value: Any) -> bool:
    if is_number(value):
        return abs(value) <= _MAX_TIMESTAMP_MS
    text = str(value)
    try:
        first, second = (dtparser.parse(text, default=d).date() for d in _FILL_DEFAULTS)
    except (ValueError, OverflowError, TypeError):
        return False
    return first == second


def is_date_like(value: Any) -> bool:
    # Short numbers (jersey numbers, percentages, goals) are never dates.
    if is_number(value) and len(as_text(value)) < settings.DATE_GUARD_MIN_CHARS:
        return False
    return _parses_as_date(value)


def is_numeric_like(value: Any) -> bool:
    if is_number(value):
        return True
    if isinstance(value, str):
        return value.strip() == "" or as_number(value) is not None
    return False


def classify_column(table: Table, column: str) -> ColumnType:
    """Tag *column* as numeric, date or categorical.

    Both the date and numeric tests need more than one distinct sampled value,
    so constant columns always fall through to categorical.
    """
    sample = column_sample(table, column)
    if not sample:
        return ColumnType.CATEGORICAL

    varied = len(set(sample)) > 1
    if varied and all(is_date_like(v) for v in sample):
        return ColumnType.DATE
    if varied and all(is_numeric_like(v) for v in sample):
        return ColumnType.NUMERIC
    return ColumnType.CATEGORICAL


def unique_count(table: Table, column: str) -> int:
    return len(set(table.values(column)))


def profile_columns(table: Table) -> list[ColumnProfile]:
    return [
        ColumnProfile(
            name=column,
            type=classify_column(table, column),
            unique_count=unique_count(table, column),
        )
        for column in table.columns
    ]
