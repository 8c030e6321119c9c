"""Slip builder endpoints."""
from fastapi import APIRouter, Depends
from matchsight.api.deps import get_store
from matchsight.api.schemas.slips import MatchRuleDTO, SlipRequest, SlipResponse
from matchsight.infra.dataset_store import DatasetStore
from matchsight.services.slips_service import SlipsService

router = APIRouter(tags=["slips"])


@router.get("/rules/default", response_model=list[MatchRuleDTO])
def default_rules(store: DatasetStore = Depends(get_store)) -> list[MatchRuleDTO]:
    return SlipsService(store).default_rules()


@router.post("/datasets/{name}/slips", response_model=SlipResponse)
def build_slips(
    name: str,
    payload: SlipRequest,
    store: DatasetStore = Depends(get_store),
) -> SlipResponse:
    return SlipsService(store).build(name, payload)
