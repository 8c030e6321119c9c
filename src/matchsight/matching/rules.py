"""Declarative threshold / category rules evaluated against single rows."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Mapping

from matchsight.config import settings
from matchsight.domain.table import as_number, as_text


class SlipType(str, Enum):
    ACCUMULATOR = "accumulator"
    SINGLE = "single"


@dataclass(frozen=True, slots=True)
class RuleFields:
    """Column names the matcher reads from each row."""

    predicted: str = "Predicted"
    probability: str = "Prob_Max"
    lambda_value: str = "Lambda_Home"


@dataclass(frozen=True, slots=True)
class MatchRule:
    """A row predicate. Unset conditions always pass.

    ``groups`` restricts the predicted outcome; ``prob_min`` is an inclusive
    lower bound; ``lambda_target`` +/- ``lambda_tolerance`` is an inclusive band.
    """

    id: str
    title: str
    market: str = ""
    groups: frozenset[str] = field(default_factory=frozenset)
    prob_min: float | None = None
    lambda_target: float | None = None
    lambda_tolerance: float | None = None
    slip_type: SlipType = SlipType.SINGLE

    def __post_init__(self) -> None:
        if not isinstance(self.groups, frozenset):
            object.__setattr__(self, "groups", frozenset(self.groups))

    @property
    def tolerance(self) -> float:
        if self.lambda_tolerance is None:
            return settings.DEFAULT_LAMBDA_TOLERANCE
        return self.lambda_tolerance

    def with_changes(self, **changes) -> MatchRule:
        return replace(self, **changes)


def matches(row: Mapping[str, object], rule: MatchRule, fields: RuleFields = RuleFields()) -> bool:
    """Return True when *row* passes every condition set on *rule*.

    Missing or non-numeric values read as 0, so evaluation is total.
    """
    if rule.groups and as_text(row.get(fields.predicted)) not in rule.groups:
        return False

    if rule.prob_min is not None:
        if as_number(row.get(fields.probability), 0.0) < rule.prob_min:
            return False

    if rule.lambda_target is not None:
        value = as_number(row.get(fields.lambda_value), 0.0)
        if abs(value - rule.lambda_target) > rule.tolerance:
            return False

    return True


def matching_rows(
    rows: Iterable[Mapping[str, object]], rule: MatchRule, fields: RuleFields = RuleFields(),
) -> list[Mapping[str, object]]:
    return [row for row in rows if matches(row, rule, fields)]
