from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from app.schemas.chat import ChatRequest, ChatResponse
from app.services.query_service import chat

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatResponse, response_model_exclude_unset=True)
def chat_endpoint(payload: ChatRequest) -> ChatResponse:
    if not payload.question or not payload.question.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Question is required")
    try:
        response = chat(payload.question, execute_in_parallel=payload.execute_in_parallel)
    except Exception as exc:
        logger.exception("Error processing chat request")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process chat request",
        ) from exc
    return ChatResponse(**response)
