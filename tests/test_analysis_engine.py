"""Automatic exploratory report."""
from matchsight.analysis.classifier import ColumnProfile, ColumnType
from matchsight.analysis.engine import ChartKind, analyze, column_mean, fixed_2, suggest_charts
from matchsight.domain.table import Table
from matchsight.ingest.csv_reader import parse_csv


def _cat(name, unique):
    return ColumnProfile(name=name, type=ColumnType.CATEGORICAL, unique_count=unique)


def _num(name, unique):
    return ColumnProfile(name=name, type=ColumnType.NUMERIC, unique_count=unique)


def _date(name, unique):
    return ColumnProfile(name=name, type=ColumnType.DATE, unique_count=unique)


def test_small_scores_file():
    table = parse_csv("Home,Away,Score\nA,B,1\nC,D,2\nA,B,1", "scores.csv")
    result = analyze(table)

    assert result.summary == 'The dataset "scores.csv" contains 3 rows and 3 columns.'
    assert result.insights == (
        "Found 1 numerical, 2 categorical, and 0 date columns.",
        'The average for "Score" is 1.33.',
        'Column "Home" has 2 unique categories.',
    )
    kinds = [(s.kind, s.column) for s in result.chart_suggestions]
    assert kinds == [(ChartKind.BAR, "Home"), (ChartKind.PIE, "Away")]
    assert result.chart_suggestions[0].title == "Distribution of Home"
    assert result.chart_suggestions[1].title == "Breakdown by Away"


def test_analyze_is_deterministic():
    table = parse_csv("Home,Away,Score\nA,B,1\nC,D,2\nA,B,1", "scores.csv")
    assert analyze(table) == analyze(table)


def test_empty_table():
    result = analyze(Table.from_records("empty.csv", ["a", "b"], []))
    assert result.summary == 'The dataset "empty.csv" is empty.'
    assert result.insights == ()
    assert result.chart_suggestions == ()


def test_row_count_uses_thousands_separator():
    table = Table.from_records("big.csv", ["n"], [{"n": float(i % 3)} for i in range(1500)])
    assert "1,500 rows" in analyze(table).summary


def test_dated_series_gets_a_line_chart():
    lines = ["Date,Goals,Team"]
    for day in range(1, 8):
        team = "Arsenal" if day % 2 else "Chelsea"
        lines.append(f"2024-08-0{day},{day},{team}")
    result = analyze(parse_csv("\n".join(lines), "season.csv"))

    assert result.insights[0] == "Found 1 numerical, 1 categorical, and 1 date columns."
    line = next(s for s in result.chart_suggestions if s.kind is ChartKind.LINE)
    assert (line.x_column, line.y_column) == ("Date", "Goals")
    assert line.title == "Goals over Time"


def test_kickoff_times_are_not_dates():
    table = parse_csv(
        "Time,HomeTeam,FTHG\n15:00,Arsenal,1\n17:30,Chelsea,2\n20:00,Leeds,3", "fixtures.csv",
    )
    result = analyze(table)

    assert result.insights[0] == "Found 1 numerical, 2 categorical, and 0 date columns."
    assert [(s.kind, s.column) for s in result.chart_suggestions] == [
        (ChartKind.BAR, "Time"), (ChartKind.PIE, "HomeTeam"),
    ]


def test_mean_rounds_ties_up():
    table = Table.from_records("t.csv", ["n"], [{"n": v} for v in (0.25, 0.0, 0.125, 0.125)])
    assert 'The average for "n" is 0.13.' in analyze(table).insights


def test_fixed_2():
    assert fixed_2(0.125) == "0.13"
    assert fixed_2(-0.125) == "-0.13"
    assert fixed_2(1.005) == "1.00"
    assert fixed_2(2.0) == "2.00"


def test_mean_skips_blank_and_text_cells():
    table = Table.from_records("t.csv", ["n"], [{"n": 1.0}, {"n": ""}, {"n": "n/a"}, {"n": "4"}])
    assert column_mean(table, "n") == 2.5


def test_bar_and_pie_never_share_a_column():
    suggestions = suggest_charts([], [_cat("x", 3), _cat("y", 2), _cat("z", 2)], [])
    assert [(s.kind, s.column) for s in suggestions] == [
        (ChartKind.BAR, "y"), (ChartKind.PIE, "z"),
    ]


def test_cardinality_limits_bar_and_pie():
    suggestions = suggest_charts([], [_cat("one", 1), _cat("many", 50), _cat("mid", 15)], [])
    assert [(s.kind, s.column) for s in suggestions] == [(ChartKind.BAR, "mid")]


def test_line_needs_a_varied_value_column():
    assert suggest_charts([_num("n", 5)], [], [_date("d", 9)]) == []
    suggestions = suggest_charts([_num("n", 5), _num("m", 6)], [], [_date("d", 9)])
    assert suggestions[0].kind is ChartKind.LINE
    assert suggestions[0].y_column == "m"


def test_scatter_uses_the_two_most_varied_numeric_columns():
    suggestions = suggest_charts([_num("a", 3), _num("b", 9), _num("c", 9)], [], [])
    assert len(suggestions) == 1
    scatter = suggestions[0]
    assert scatter.kind is ChartKind.SCATTER
    assert (scatter.x_column, scatter.y_column) == ("b", "c")
    assert scatter.title == "Relationship between b and c"


def test_scatter_skipped_for_constant_column():
    assert suggest_charts([_num("a", 10), _num("b", 1)], [], []) == []


def test_at_most_four_suggestions():
    suggestions = suggest_charts(
        [_num("a", 10), _num("b", 8)],
        [_cat("x", 3), _cat("y", 4)],
        [_date("d", 10)],
    )
    assert [s.kind for s in suggestions] == [
        ChartKind.BAR, ChartKind.PIE, ChartKind.LINE, ChartKind.SCATTER,
    ]
