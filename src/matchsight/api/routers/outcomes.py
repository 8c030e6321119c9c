"""Outcome filter endpoints."""
from fastapi import APIRouter, Depends, Query
from matchsight.api.deps import get_store
from matchsight.api.schemas.outcomes import OutcomeResponse
from matchsight.infra.dataset_store import DatasetStore
from matchsight.services.outcomes_service import OutcomesService

router = APIRouter(prefix="/datasets/{name}", tags=["outcomes"])


@router.get("/outcomes", response_model=OutcomeResponse)
def get_outcomes(
    name: str,
    sure_win: float | None = Query(None, ge=0.0, le=1.0),
    draw: float | None = Query(None, ge=0.0, le=1.0),
    store: DatasetStore = Depends(get_store),
) -> OutcomeResponse:
    return OutcomesService(store).filter(name, sure_win=sure_win, draw=draw)
