"""Team-matchup schema resolution and statistics."""
import pytest

from matchsight.analysis.engine import analyze
from matchsight.domain.exceptions import SchemaResolutionError
from matchsight.domain.table import Table
from matchsight.ingest.csv_reader import parse_csv
from matchsight.matchups.schema import (
    load_matchups, matchup_rule_rows, normalize_header, resolve_columns,
)
from matchsight.matchups.stats import (
    filter_by_probability, highlight_match, lambda_averages, predicted_distribution, prob_stats,
)


@pytest.fixture
def matchups(matchup_csv):
    return load_matchups(parse_csv(matchup_csv.decode(), "matchups.csv"))


@pytest.mark.parametrize("raw,expected", [
    ("Prob_Max", "prob_max"),
    ("  Prob Max ", "prob_max"),
    ("lambda-home", "lambda_home"),
    ("Lambda  -  Home", "lambda_home"),
])
def test_normalize_header(raw, expected):
    assert normalize_header(raw) == expected


def test_resolve_columns_with_aliases():
    columns = resolve_columns(
        ["HomeTeam", "AwayTeam", "Prediction", "probability_max", "Lambda Home", "lambda-away", "Kickoff"]
    )
    assert columns.team == "HomeTeam"
    assert columns.opponent == "AwayTeam"
    assert columns.predicted == "Prediction"
    assert columns.prob_max == "probability_max"
    assert columns.lambda_home == "Lambda Home"
    assert columns.lambda_away == "lambda-away"
    assert columns.date == "Kickoff"
    assert columns.division is None


def test_missing_lambda_away_only_blocks_the_matchup_view():
    table = parse_csv(
        "Team,Opponent,Predicted,Prob_Max,Lambda_Home\nArsenal,Chelsea,1-1,0.22,1.52\nLeeds,Burnley,2-1,0.18,1.8",
        "partial.csv",
    )
    with pytest.raises(SchemaResolutionError) as exc_info:
        load_matchups(table)
    assert exc_info.value.field == "Lambda_Away"
    assert exc_info.value.message == "Missing required column: Lambda_Away"

    assert analyze(table).summary == 'The dataset "partial.csv" contains 2 rows and 5 columns.'


def test_first_missing_field_is_reported():
    with pytest.raises(SchemaResolutionError) as exc_info:
        resolve_columns(["Opponent", "Predicted"])
    assert exc_info.value.field == "Team"


def test_load_matchups(matchups):
    first = matchups[0]
    assert (first.team, first.opponent, first.predicted) == ("Arsenal", "Chelsea", "1-1")
    assert (first.prob_max, first.lambda_home, first.lambda_away) == (0.22, 1.52, 1.1)
    assert first.division == "E0"
    assert first.date == ""


def test_load_matchups_fills_gaps():
    table = parse_csv(
        "Team,Opponent,Predicted,Prob_Max,Lambda_Home,Lambda_Away\nArsenal,Chelsea,,n/a,1.2,",
        "gaps.csv",
    )
    (row,) = load_matchups(table)
    assert row.predicted == ""
    assert row.prob_max == 0.0
    assert row.lambda_away == 0.0


def test_blank_predicted_counts_as_unspecified():
    table = parse_csv(
        "Team,Opponent,Predicted,Prob_Max,Lambda_Home,Lambda_Away\n"
        "Arsenal,Chelsea,,0.2,1.2,0.8\nLeeds,Burnley,1-1,0.3,1.4,1.0",
        "blank.csv",
    )
    rows = load_matchups(table)
    assert predicted_distribution(rows) == {"Unspecified": 1, "1-1": 1}
    assert [a.category for a in lambda_averages(rows)] == ["Unspecified", "1-1"]


def test_absent_predicted_key_reads_as_unknown():
    table = Table.from_records(
        "short.csv",
        ["Team", "Opponent", "Predicted", "Prob_Max", "Lambda_Home", "Lambda_Away"],
        [{"Team": "Arsenal", "Opponent": "Chelsea", "Prob_Max": 0.2}],
    )
    (row,) = load_matchups(table)
    assert row.predicted == "Unknown"


def test_matchup_rule_rows_use_logical_names(matchups):
    row = matchup_rule_rows(matchups)[1]
    assert row["Predicted"] == "2-1"
    assert row["Prob_Max"] == 0.18
    assert row["Lambda_Home"] == 1.8
    assert row["Division"] == "E1"


def test_prob_stats(matchups):
    stats = prob_stats(matchups)
    assert stats.min == 0.18 and stats.max == 0.3
    assert stats.average == pytest.approx(0.2375)


def test_prob_stats_empty():
    stats = prob_stats([])
    assert (stats.min, stats.max, stats.average) == (0.0, 1.0, 0.0)


def test_filter_and_distribution(matchups):
    kept = filter_by_probability(matchups, 0.2)
    assert [r.team for r in kept] == ["Arsenal", "Everton", "Spurs"]
    assert predicted_distribution(matchups) == {"1-1": 2, "2-1": 1, "0-0": 1}
    assert list(predicted_distribution(matchups)) == ["1-1", "2-1", "0-0"]


def test_lambda_averages(matchups):
    averages = {a.category: a for a in lambda_averages(matchups)}
    assert averages["1-1"].home == pytest.approx(1.56)
    assert averages["1-1"].away == pytest.approx(1.2)
    assert averages["0-0"].home == 1.0


def test_highlight_match(matchups):
    assert highlight_match(matchups).team == "Spurs"
    assert highlight_match([]) is None
