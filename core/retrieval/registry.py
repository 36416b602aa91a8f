"""Registry of named retrieval functions and the result envelope they produce."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from storage.dataset import Dataset

logger = logging.getLogger(__name__)

Parameters = Mapping[str, Optional[str]]
Handler = Callable[[Dataset, Parameters], List[Dict[str, Any]]]


class FunctionNotFoundError(LookupError):
    """The selected function name has no registry entry."""

    def __init__(self, name: str):
        super().__init__(f"Function {name} not found")
        self.name = name


@dataclass(frozen=True)
class RetrievalResult:
    """Category-tagged result envelope returned by every retrieval function."""

    function_used: str
    category: str
    results: List[Dict[str, Any]] = field(default_factory=list)
    execution_time: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "functionUsed": self.function_used,
            "category": self.category,
            "results": self.results,
            "executionTime": self.execution_time,
        }


@dataclass(frozen=True)
class RetrievalFunction:
    name: str
    description: str
    category: str
    handler: Handler

    def execute(self, dataset: Dataset, params: Parameters) -> RetrievalResult:
        results = self.handler(dataset, params or {})
        return RetrievalResult(
            function_used=self.name,
            category=self.category,
            results=list(results),
            execution_time=dt.datetime.now(dt.timezone.utc).isoformat(),
        )

    def describe(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description, "category": self.category}


class RetrievalRegistry:
    """Fixed name → function mapping bound to one dataset; read-only once built."""

    def __init__(self, dataset: Dataset, functions: List[RetrievalFunction]):
        self.dataset = dataset
        self._functions: Dict[str, RetrievalFunction] = {}
        for func in functions:
            if func.name in self._functions:
                raise ValueError(f"Duplicate retrieval function: {func.name}")
            self._functions[func.name] = func

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def get(self, name: str) -> RetrievalFunction:
        try:
            return self._functions[name]
        except KeyError:
            raise FunctionNotFoundError(name) from None

    def invoke(self, name: str, params: Parameters) -> RetrievalResult:
        func = self.get(name)
        result = func.execute(self.dataset, params)
        logger.debug("Executed %s with %s -> %d results", name, dict(params or {}), len(result.results))
        return result

    def describe(self) -> List[Dict[str, str]]:
        """Function descriptions in registration order."""
        return [func.describe() for func in self._functions.values()]
