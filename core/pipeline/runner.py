"""End-to-end query execution: select, execute, render, report."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List

from core.generator.templates import render
from core.retrieval.executor import execute
from core.retrieval.registry import RetrievalRegistry, RetrievalResult
from core.selector.intent_selector import FunctionSelection, IntentSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionPath:
    function_used: str
    category: str
    result_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "functionUsed": self.function_used,
            "category": self.category,
            "resultCount": self.result_count,
        }


@dataclass(frozen=True)
class ExecutionReport:
    """Everything produced while answering one question."""

    function_selection: FunctionSelection
    retrieval_result: RetrievalResult
    response: str
    execution_time_ms: int
    execution_path: ExecutionPath

    def to_dict(self) -> Dict[str, Any]:
        return {
            "functionSelection": self.function_selection.to_dict(),
            "retrievalResult": self.retrieval_result.to_dict(),
            "response": self.response,
            "executionTimeMs": self.execution_time_ms,
            "executionPath": self.execution_path.to_dict(),
        }


class QueryRunner:
    """Sequential selection → execution → rendering over a read-only registry."""

    def __init__(self, selector: IntentSelector, registry: RetrievalRegistry):
        self.selector = selector
        self.registry = registry

    def run(self, question: str) -> ExecutionReport:
        """Answer one question; FunctionNotFoundError propagates to the caller."""
        start = time.perf_counter()
        selection = self.selector.select(question)
        result = execute(selection, self.registry)
        response = render(question, result)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "Answered with %s (%d results) in %d ms",
            selection.selected_function,
            len(result.results),
            elapsed_ms,
        )
        return ExecutionReport(
            function_selection=selection,
            retrieval_result=result,
            response=response,
            execution_time_ms=elapsed_ms,
            execution_path=ExecutionPath(
                function_used=selection.selected_function,
                category=result.category,
                result_count=len(result.results),
            ),
        )

    def run_parallel(self, question: str, copies: int = 2) -> List[ExecutionReport]:
        """Run independent copies of the same query concurrently, in submission order."""
        if copies < 1:
            raise ValueError("copies must be at least 1")
        with ThreadPoolExecutor(max_workers=copies) as pool:
            futures = [pool.submit(self.run, question) for _ in range(copies)]
            return [future.result() for future in futures]

    def check_consistency(self) -> List[str]:
        """Names the selector can pick that the registry does not know."""
        return [name for name in self.selector.functions if name not in self.registry]
