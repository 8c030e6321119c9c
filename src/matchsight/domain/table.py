"""In-memory table model shared by every core component.

A ``Table`` is built once per uploaded file and never mutated. Cells are either
``float`` or ``str``; the helpers here are the only place values are coerced,
so every consumer reads numbers and text the same way.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Sequence

Cell = float | str
Row = Mapping[str, Cell]

# Number() literal forms: decimal with optional exponent, Infinity, and the
# unsigned 0x / 0o / 0b integer prefixes.
_DECIMAL_RE = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$")
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def parse_number(text: str) -> float | None:
    """Convert *text* the way ``Number(text)`` would, or return None for NaN.

    Blank text is rejected here; callers decide what an empty cell means.
    """
    text = text.strip()
    if not text:
        return None
    if _PREFIXED_RE.match(text):
        return float(int(text, 0))
    if _DECIMAL_RE.match(text):
        if text.lstrip("+-") == "Infinity":
            return -math.inf if text.startswith("-") else math.inf
        return float(text)
    return None


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def as_number(value: Any, default: float | None = None) -> float | None:
    """Finite float for a number or numeric-looking string, else *default*."""
    if is_number(value):
        number = float(value)
    elif isinstance(value, str):
        number = parse_number(value)
        if number is None:
            return default
    else:
        return default
    return number if math.isfinite(number) else default


def number_text(value: float) -> str:
    """Shortest decimal text for *value*, formatted like a JS number string."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(float(value))
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'-' if power < 0 else '+'}{abs(power)}"


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if is_number(value):
        return number_text(float(value))
    return str(value)


@dataclass(frozen=True, slots=True)
class Table:
    """Rectangular dataset parsed from one file.

    ``columns`` keeps header order, duplicates included. A row may hold fewer
    keys than ``columns``; missing keys read as ``None``.
    """

    name: str
    columns: tuple[str, ...]
    rows: tuple[Row, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(
        cls, name: str, columns: Sequence[str], records: Iterable[Mapping[str, Any]],
    ) -> Table:
        rows = tuple(MappingProxyType(dict(record)) for record in records)
        return cls(name=name, columns=tuple(columns), rows=rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def has_columns(self, *names: str) -> bool:
        return all(name in self.columns for name in names)

    def missing_columns(self, names: Iterable[str]) -> list[str]:
        return [name for name in names if name not in self.columns]

    def values(self, column: str) -> Iterator[Cell | None]:
        for row in self.rows:
            yield row.get(column)
