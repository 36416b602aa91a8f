from __future__ import annotations

from typing import List

from app.schemas.common import CamelModel, Category


class ScenarioPayload(CamelModel):
    id: str
    name: str
    question: str
    expected_category: Category
    description: str


class ScenariosResponse(CamelModel):
    scenarios: List[ScenarioPayload]
