from __future__ import annotations

from fastapi import APIRouter

from app.schemas.scenarios import ScenariosResponse
from app.services.scenario_service import list_scenarios

router = APIRouter(prefix="/api")


@router.get("/test-scenarios", response_model=ScenariosResponse)
def scenarios_endpoint() -> ScenariosResponse:
    return ScenariosResponse(scenarios=list_scenarios())
