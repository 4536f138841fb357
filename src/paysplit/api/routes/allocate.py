from fastapi import APIRouter, HTTPException

from paysplit.agents.orchestrator import AllocationOrchestrator
from paysplit.config import settings
from paysplit.schemas.requests import AllocateRequest
from paysplit.schemas.responses import AllocateResponse

router = APIRouter(tags=["allocate"])
orchestrator = AllocationOrchestrator(settings.points_method_id, settings.discount_unit)


@router.post("/allocate", response_model=AllocateResponse)
def allocate(request: AllocateRequest) -> AllocateResponse:
    try:
        return orchestrator.allocate(request)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
