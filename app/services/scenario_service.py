"""Canned demonstration questions loaded from config/scenarios.yaml."""

from __future__ import annotations

from typing import Dict, List

from app.deps import get_scenarios


def list_scenarios() -> List[Dict[str, str]]:
    scenarios = []
    for entry in get_scenarios():
        scenarios.append(
            {
                "id": str(entry["id"]),
                "name": entry["name"],
                "question": entry["question"],
                "expectedCategory": entry.get("expected_category", ""),
                "description": entry.get("description", ""),
            }
        )
    return scenarios
