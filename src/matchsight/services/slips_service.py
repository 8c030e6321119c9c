"""Slip builder use-case service."""
from __future__ import annotations
from matchsight.infra.dataset_store import DatasetStore
from matchsight.matching.rules import MatchRule, SlipType
from matchsight.matching.slips import (
    DEFAULT_RULES, SimpleFilter, Slip, apply_simple_filter, build_slips, group_slips,
)
from matchsight.matchups.schema import load_matchups, matchup_rule_rows
from matchsight.api.schemas.slips import (
    MatchRuleDTO, SlipRead, SlipRequest, SlipResponse, SlipTypeDTO,
)
from matchsight.services.datasets_service import require_table, row_to_dict


def rule_from_dto(dto: MatchRuleDTO) -> MatchRule:
    return MatchRule(
        id=dto.id,
        title=dto.title,
        market=dto.market,
        groups=frozenset(dto.groups),
        prob_min=dto.prob_min,
        lambda_target=dto.lambda_target,
        lambda_tolerance=dto.lambda_tolerance,
        slip_type=SlipType(dto.slip_type.value),
    )


def rule_to_dto(rule: MatchRule) -> MatchRuleDTO:
    return MatchRuleDTO(
        id=rule.id,
        title=rule.title,
        market=rule.market,
        groups=sorted(rule.groups),
        prob_min=rule.prob_min,
        lambda_target=rule.lambda_target,
        lambda_tolerance=rule.lambda_tolerance,
        slip_type=SlipTypeDTO(rule.slip_type.value),
    )


def _slip_read(slip: Slip) -> SlipRead:
    return SlipRead(
        rule=rule_to_dto(slip.rule),
        selections=[row_to_dict(r) for r in slip.selections],
        total_matches=slip.total_matches,
        more_available=slip.more_available,
    )


class SlipsService:
    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def default_rules(self) -> list[MatchRuleDTO]:
        return [rule_to_dto(r) for r in DEFAULT_RULES]

    def build(self, name: str, request: SlipRequest) -> SlipResponse:
        table = require_table(self._store, name)
        rows = matchup_rule_rows(load_matchups(table))
        filtered = apply_simple_filter(rows, SimpleFilter(prob_min=request.prob_min, group=request.group))

        rules = DEFAULT_RULES if request.rules is None else tuple(rule_from_dto(r) for r in request.rules)
        grouped = group_slips(build_slips(rules, filtered))

        return SlipResponse(
            filtered_count=len(filtered),
            accumulators=[_slip_read(s) for s in grouped[SlipType.ACCUMULATOR]],
            singles=[_slip_read(s) for s in grouped[SlipType.SINGLE]],
        )
