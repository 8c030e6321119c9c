"""Analysis endpoints."""
from fastapi import APIRouter, Depends
from matchsight.api.deps import get_store
from matchsight.api.schemas.analysis import AnalysisResponse
from matchsight.infra.dataset_store import DatasetStore
from matchsight.services.analysis_service import AnalysisService

router = APIRouter(prefix="/datasets/{name}", tags=["analysis"])


@router.get("/analysis", response_model=AnalysisResponse)
def get_analysis(name: str, store: DatasetStore = Depends(get_store)) -> AnalysisResponse:
    return AnalysisService(store).analyze(name)
