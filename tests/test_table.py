"""Cell coercion helpers and the Table model."""
import math

import pytest

from matchsight.domain.table import (
    Table, as_number, as_text, is_blank, number_text, parse_number,
)


@pytest.mark.parametrize("text,expected", [
    ("42", 42.0),
    ("-1.5", -1.5),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("0x1A", 26.0),
    ("0b101", 5.0),
    (" 7 ", 7.0),
])
def test_parse_number_accepts_number_literals(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,000", "nan", "inf", "1_000", "2-1", "-0x1A"])
def test_parse_number_rejects_non_numbers(text):
    assert parse_number(text) is None


def test_parse_number_infinity():
    assert parse_number("Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf


def test_as_number():
    assert as_number(3.5) == 3.5
    assert as_number(2) == 2.0
    assert as_number("0.25") == 0.25
    assert as_number("Home", 0.0) == 0.0
    assert as_number(None) is None
    assert as_number(math.inf, -1.0) == -1.0
    assert as_number(True, 0.0) == 0.0


def test_number_text_matches_js_formatting():
    assert number_text(2.0) == "2"
    assert number_text(0.4523) == "0.4523"
    assert number_text(1e-5) == "0.00001"
    assert number_text(1e-7) == "1e-7"
    assert number_text(1e21) == "1e+21"
    assert number_text(-3.0) == "-3"


def test_as_text_and_is_blank():
    assert as_text(None) == ""
    assert as_text(1.0) == "1"
    assert as_text("Draw") == "Draw"
    assert is_blank("") and is_blank(None)
    assert not is_blank(0.0)


def test_table_rows_are_read_only():
    table = Table.from_records("t.csv", ["a"], [{"a": 1.0}])
    with pytest.raises(TypeError):
        table.rows[0]["a"] = 2.0


def test_table_values_reads_missing_keys_as_none():
    table = Table.from_records("t.csv", ["a", "b"], [{"a": 1.0}, {"a": 2.0, "b": "x"}])
    assert list(table.values("b")) == [None, "x"]
    assert table.has_columns("a", "b")
    assert table.missing_columns(["a", "c"]) == ["c"]
    assert table.row_count == 2 and table.column_count == 2
