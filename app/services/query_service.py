"""Query service wiring the shared QueryRunner into CLI and API callers."""

from __future__ import annotations

import datetime as dt
from typing import Dict, List

from app.deps import get_runner
from core.pipeline.runner import ExecutionReport


def run_query(question: str) -> ExecutionReport:
    """Answer one question end to end; executor failures propagate."""
    return get_runner().run(question)


def run_parallel(question: str, copies: int = 2) -> List[ExecutionReport]:
    return get_runner().run_parallel(question, copies=copies)


def chat(question: str, execute_in_parallel: bool = False) -> Dict:
    """Build the chat payload: one execution, or two independent ones in parallel mode."""
    payload: Dict = {"question": question, "parallelExecution": execute_in_parallel}
    if execute_in_parallel:
        payload["executions"] = [report.to_dict() for report in run_parallel(question)]
    else:
        payload["execution"] = run_query(question).to_dict()
    payload["timestamp"] = dt.datetime.now(dt.timezone.utc).isoformat()
    return payload
