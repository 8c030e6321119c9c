"""Team-matchup endpoints."""
from fastapi import APIRouter, Depends
from matchsight.api.deps import get_store
from matchsight.api.schemas.matchups import MatchupResponse
from matchsight.infra.dataset_store import DatasetStore
from matchsight.services.matchups_service import MatchupsService

router = APIRouter(prefix="/datasets/{name}", tags=["matchups"])


@router.get("/matchups", response_model=MatchupResponse)
def get_matchups(
    name: str,
    prob_min: float | None = None,
    store: DatasetStore = Depends(get_store),
) -> MatchupResponse:
    return MatchupsService(store).summarize(name, prob_min=prob_min)
