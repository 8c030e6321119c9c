"""Betting-slip assembly from an ordered rule set.

Rows first pass a simple probability / predicted-group filter, then each rule
collects its matches. Only the first few selections per rule are kept for
display, alongside the true match count.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from matchsight.config import settings
from matchsight.domain.table import as_number, as_text
from matchsight.matching.rules import MatchRule, RuleFields, SlipType, matching_rows

ALL_GROUPS = "all"

RuleSet = tuple[MatchRule, ...]

DEFAULT_RULES: RuleSet = (
    MatchRule(
        id="home_banker_acca",
        title="Home Banker Acca",
        market="Correct Score",
        groups=frozenset({"2-0", "2-1", "3-1"}),
        prob_min=0.12,
        slip_type=SlipType.ACCUMULATOR,
    ),
    MatchRule(
        id="low_scoring_draws",
        title="Low-Scoring Draws",
        market="Correct Score",
        groups=frozenset({"0-0", "1-1"}),
        lambda_target=1.0,
        lambda_tolerance=0.25,
        slip_type=SlipType.ACCUMULATOR,
    ),
    MatchRule(
        id="goal_fest_acca",
        title="Goal Fest Acca",
        market="Over 2.5 Goals",
        groups=frozenset({"2-2", "3-1", "3-2", "1-3", "2-3"}),
        lambda_target=1.8,
        lambda_tolerance=0.3,
        slip_type=SlipType.ACCUMULATOR,
    ),
    MatchRule(
        id="one_all_single",
        title="1-1 Single",
        market="Correct Score",
        groups=frozenset({"1-1"}),
        lambda_target=1.5,
        lambda_tolerance=0.05,
        slip_type=SlipType.SINGLE,
    ),
    MatchRule(
        id="top_confidence_single",
        title="Top Confidence Single",
        market="Correct Score",
        prob_min=0.2,
        slip_type=SlipType.SINGLE,
    ),
)


@dataclass(frozen=True, slots=True)
class SimpleFilter:
    prob_min: float = 0.0
    group: str = ALL_GROUPS


@dataclass(frozen=True, slots=True)
class Slip:
    rule: MatchRule
    selections: tuple[Mapping[str, object], ...] = ()
    total_matches: int = 0

    @property
    def more_available(self) -> int:
        return self.total_matches - len(self.selections)


def apply_simple_filter(
    rows: Iterable[Mapping[str, object]],
    simple: SimpleFilter,
    fields: RuleFields = RuleFields(),
) -> list[Mapping[str, object]]:
    return [
        row for row in rows
        if as_number(row.get(fields.probability), 0.0) >= simple.prob_min
        and (simple.group == ALL_GROUPS or as_text(row.get(fields.predicted)) == simple.group)
    ]


def build_slips(
    rules: Sequence[MatchRule],
    rows: Sequence[Mapping[str, object]],
    fields: RuleFields = RuleFields(),
    cap: int | None = None,
) -> list[Slip]:
    """One slip per rule with at least one match, in rule order."""
    cap = settings.SLIP_SELECTION_CAP if cap is None else cap
    slips = []
    for rule in rules:
        hits = matching_rows(rows, rule, fields)
        if not hits:
            continue
        slips.append(Slip(rule=rule, selections=tuple(hits[:cap]), total_matches=len(hits)))
    return slips


def group_slips(slips: Iterable[Slip]) -> dict[SlipType, list[Slip]]:
    grouped: dict[SlipType, list[Slip]] = {kind: [] for kind in SlipType}
    for slip in slips:
        grouped[slip.rule.slip_type].append(slip)
    return grouped
