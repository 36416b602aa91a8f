"""Dispatch a function selection to the registry."""

from __future__ import annotations

from core.retrieval.registry import RetrievalRegistry, RetrievalResult
from core.selector.intent_selector import FunctionSelection


def execute(selection: FunctionSelection, registry: RetrievalRegistry) -> RetrievalResult:
    """Run the selected function; raises FunctionNotFoundError when it is not registered."""
    return registry.invoke(selection.selected_function, selection.parameters)
