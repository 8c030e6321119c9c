"""Slip builder DTOs. Pure Pydantic, no domain imports."""
from __future__ import annotations
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


class SlipTypeDTO(str, Enum):
    ACCUMULATOR = "accumulator"
    SINGLE = "single"


class MatchRuleDTO(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    title: str
    market: str = ""
    groups: list[str] = Field(default_factory=list)
    prob_min: float | None = None
    lambda_target: float | None = None
    lambda_tolerance: float | None = Field(default=None, ge=0.0)
    slip_type: SlipTypeDTO = SlipTypeDTO.SINGLE


class SlipRequest(BaseModel):
    prob_min: float = 0.0
    group: str = "all"
    rules: list[MatchRuleDTO] | None = None


class SlipRead(BaseModel):
    rule: MatchRuleDTO
    selections: list[dict[str, Any]]
    total_matches: int
    more_available: int


class SlipResponse(BaseModel):
    filtered_count: int
    accumulators: list[SlipRead]
    singles: list[SlipRead]
