from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.schemas.common import CamelModel, Category


class FunctionSelectionPayload(CamelModel):
    selected_function: str
    parameters: Dict[str, Optional[str]]
    reasoning: str


class RetrievalResultPayload(CamelModel):
    function_used: str
    category: Category
    results: List[Dict[str, Any]]
    execution_time: str


class ExecutionPathPayload(CamelModel):
    function_used: str
    category: Category
    result_count: int


class ExecutionReportPayload(CamelModel):
    function_selection: FunctionSelectionPayload
    retrieval_result: RetrievalResultPayload
    response: str
    execution_time_ms: int = Field(..., ge=0)
    execution_path: ExecutionPathPayload


class ChatRequest(CamelModel):
    question: Optional[str] = None
    execute_in_parallel: bool = False


class ChatResponse(CamelModel):
    question: str
    parallel_execution: bool
    execution: Optional[ExecutionReportPayload] = None
    executions: Optional[List[ExecutionReportPayload]] = None
    timestamp: str
