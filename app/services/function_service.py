"""Direct access to the retrieval function registry."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from app.deps import get_registry
from core.retrieval.registry import RetrievalResult


def list_functions() -> List[Dict[str, str]]:
    return get_registry().describe()


def call_function(name: str, parameters: Mapping[str, Optional[str]] | None = None) -> RetrievalResult:
    """Invoke a registered function by name; raises FunctionNotFoundError for unknown names."""
    return get_registry().invoke(name, parameters or {})
