from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.schemas.functions import FunctionsResponse, RetrieveRequest, RetrieveResponse
from app.services.function_service import call_function, list_functions
from core.retrieval.registry import FunctionNotFoundError

router = APIRouter(prefix="/api")


@router.get("/functions", response_model=FunctionsResponse)
def functions_endpoint() -> FunctionsResponse:
    return FunctionsResponse(functions=list_functions())


@router.post("/retrieve", response_model=RetrieveResponse)
def retrieve_endpoint(payload: RetrieveRequest) -> RetrieveResponse:
    try:
        result = call_function(payload.function, payload.parameters)
    except FunctionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return RetrieveResponse(**result.to_dict())
