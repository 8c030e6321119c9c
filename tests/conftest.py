"""Shared test fixtures.

  store        : a fresh in-memory DatasetStore per test.
  client       : FastAPI TestClient whose store dependency points at ``store``.
  matchup_csv  : a small team-matchup export using aliased headers.
  outcome_csv  : a home/draw/away probability export.
"""
import pytest

from matchsight.infra.dataset_store import DatasetStore


@pytest.fixture
def matchup_csv() -> bytes:
    return (
        b"Team,Opponent,Predicted,Prob Max,lambda-home,Lambda Away,Div\n"
        b"Arsenal,Chelsea,1-1,0.22,1.52,1.1,E0\n"
        b"Leeds,Burnley,2-1,0.18,1.8,0.9,E1\n"
        b"Everton,Fulham,1-1,0.25,1.6,1.3,E0\n"
        b"Spurs,Wolves,0-0,0.3,1.0,0.8,E0\n"
    )


@pytest.fixture
def outcome_csv() -> bytes:
    return (
        b"Date,Team,Opponent,Prob_HomeWin,Prob_Draw,Prob_AwayWin\n"
        b"2024-08-17,Arsenal,Wolves,0.9,0.05,0.05\n"
        b"2024-08-18,Chelsea,Everton,0.3,0.85,0.05\n"
        b"2024-08-19,Leeds,Spurs,0.1,0.2,0.7\n"
    )


@pytest.fixture
def store():
    return DatasetStore()


@pytest.fixture
def client(store):
    """FastAPI TestClient backed by the per-test store."""
    from fastapi.testclient import TestClient
    from matchsight.api.app import create_app
    from matchsight.api.deps import get_store

    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
