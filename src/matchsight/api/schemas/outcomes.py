"""Outcome filter DTOs. Pure Pydantic, no domain imports."""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel


class OutcomePick(BaseModel):
    predicted_result: str
    row: dict[str, Any]


class OutcomeResponse(BaseModel):
    available: bool
    message: str | None = None
    sure_win_threshold: float
    draw_threshold: float
    sure_wins: list[OutcomePick] = []
    draws: list[OutcomePick] = []
