"""Automatic exploratory report for a parsed table.

The report is purely structural: column types and cardinalities drive a short
summary, a few insights, and up to four chart recommendations.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from matchsight.analysis.classifier import ColumnProfile, ColumnType, profile_columns
from matchsight.config import settings
from matchsight.domain.table import Table, as_number


class ChartKind(str, Enum):
    BAR = "bar"
    PIE = "pie"
    LINE = "line"
    SCATTER = "scatter"


@dataclass(frozen=True, slots=True)
class ChartSuggestion:
    """One recommended chart.

    Bar and pie charts set ``column``; line and scatter charts set
    ``x_column`` and ``y_column``.
    """

    kind: ChartKind
    title: str
    description: str
    column: str | None = None
    x_column: str | None = None
    y_column: str | None = None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    summary: str
    insights: tuple[str, ...] = ()
    chart_suggestions: tuple[ChartSuggestion, ...] = ()
    profiles: tuple[ColumnProfile, ...] = ()


def bar_chart(column: str) -> ChartSuggestion:
    return ChartSuggestion(
        kind=ChartKind.BAR,
        column=column,
        title=f"Distribution of {column}",
        description=f'A bar chart showing the frequency of each category in the "{column}" column.',
    )


def pie_chart(column: str) -> ChartSuggestion:
    return ChartSuggestion(
        kind=ChartKind.PIE,
        column=column,
        title=f"Breakdown by {column}",
        description=f'A pie chart illustrating the proportion of each category in the "{column}" column.',
    )


def line_chart(x_column: str, y_column: str) -> ChartSuggestion:
    return ChartSuggestion(
        kind=ChartKind.LINE,
        x_column=x_column,
        y_column=y_column,
        title=f"{y_column} over Time",
        description=f'A line chart showing the trend of "{y_column}" against "{x_column}".',
    )


def scatter_chart(x_column: str, y_column: str) -> ChartSuggestion:
    return ChartSuggestion(
        kind=ChartKind.SCATTER,
        x_column=x_column,
        y_column=y_column,
        title=f"Relationship between {x_column} and {y_column}",
        description=f'A scatter plot to explore the correlation between "{x_column}" and "{y_column}".',
    )


def _fewest_categories(
    profiles: list[ColumnProfile], max_unique: int, exclude: str | None = None,
) -> ColumnProfile | None:
    eligible = [
        p for p in profiles
        if p.name != exclude and 1 < p.unique_count <= max_unique
    ]
    # min() keeps the first of equal candidates, i.e. header order.
    return min(eligible, key=lambda p: p.unique_count, default=None)


def fixed_2(value: float) -> str:
    """Two-decimal text with ties rounded away from zero on the exact binary value."""
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def column_mean(table: Table, column: str) -> float | None:
    numbers = [n for n in (as_number(v) for v in table.values(column)) if n is not None]
    if not numbers:
        return None
    return sum(numbers) / len(numbers)


def suggest_charts(
    numeric: list[ColumnProfile],
    categorical: list[ColumnProfile],
    dates: list[ColumnProfile],
) -> list[ChartSuggestion]:
    suggestions: list[ChartSuggestion] = []

    bar = _fewest_categories(categorical, settings.BAR_MAX_CATEGORIES)
    if bar is not None:
        suggestions.append(bar_chart(bar.name))

    pie = _fewest_categories(
        categorical, settings.PIE_MAX_CATEGORIES, exclude=bar.name if bar else None,
    )
    if pie is not None:
        suggestions.append(pie_chart(pie.name))

    if dates and numeric:
        # Near-constant or ID-like numeric columns make poor trend lines.
        value_axis = next((p for p in numeric if p.unique_count > settings.LINE_MIN_UNIQUE), None)
        if value_axis is not None:
            suggestions.append(line_chart(dates[0].name, value_axis.name))

    if len(numeric) >= 2:
        first, second = sorted(numeric, key=lambda p: p.unique_count, reverse=True)[:2]
        if first.unique_count > 1 and second.unique_count > 1:
            suggestions.append(scatter_chart(first.name, second.name))

    return suggestions[:settings.MAX_CHART_SUGGESTIONS]


def analyze(table: Table) -> AnalysisResult:
    """Build the summary, insights and chart suggestions for *table*.

    Never raises for a well-formed table; sparse or ambiguous columns simply
    classify as categorical.
    """
    if table.is_empty:
        return AnalysisResult(summary=f'The dataset "{table.name}" is empty.')

    summary = (
        f'The dataset "{table.name}" contains {table.row_count:,} rows '
        f"and {table.column_count} columns."
    )

    profiles = profile_columns(table)
    numeric = [p for p in profiles if p.type is ColumnType.NUMERIC]
    categorical = [p for p in profiles if p.type is ColumnType.CATEGORICAL]
    dates = [p for p in profiles if p.type is ColumnType.DATE]

    insights = [
        f"Found {len(numeric)} numerical, {len(categorical)} categorical, "
        f"and {len(dates)} date columns."
    ]
    if numeric:
        mean = column_mean(table, numeric[0].name)
        if mean is not None:
            insights.append(f'The average for "{numeric[0].name}" is {fixed_2(mean)}.')
    if categorical:
        smallest = min(categorical, key=lambda p: p.unique_count)
        insights.append(f'Column "{smallest.name}" has {smallest.unique_count} unique categories.')

    return AnalysisResult(
        summary=summary,
        insights=tuple(insights),
        chart_suggestions=tuple(suggest_charts(numeric, categorical, dates)),
        profiles=tuple(profiles),
    )
