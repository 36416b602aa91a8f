from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from app.schemas.chat import RetrievalResultPayload
from app.schemas.common import CamelModel, Category


class FunctionDescription(CamelModel):
    name: str
    description: str
    category: Category


class FunctionsResponse(CamelModel):
    functions: List[FunctionDescription]


class RetrieveRequest(CamelModel):
    function: str = Field(..., min_length=1)
    parameters: Dict[str, Optional[str]] = Field(default_factory=dict)


RetrieveResponse = RetrievalResultPayload
