"""Team-matchup DTOs. Pure Pydantic, no domain imports."""
from __future__ import annotations
from pydantic import BaseModel


class MatchupRowRead(BaseModel):
    model_config = {"from_attributes": True}

    team: str
    opponent: str
    predicted: str
    prob_max: float
    lambda_home: float
    lambda_away: float
    date: str = ""
    division: str = ""


class ProbStatsRead(BaseModel):
    model_config = {"from_attributes": True}

    min: float
    max: float
    average: float


class LambdaAverageRead(BaseModel):
    model_config = {"from_attributes": True}

    category: str
    home: float
    away: float


class MatchupResponse(BaseModel):
    total: int
    prob_min: float
    stats: ProbStatsRead
    rows: list[MatchupRowRead]
    distribution: dict[str, int]
    lambda_averages: list[LambdaAverageRead]
    highlight: MatchupRowRead | None = None
