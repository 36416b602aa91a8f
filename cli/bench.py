from __future__ import annotations

import statistics

from app.deps import get_app_state
from app.services.query_service import run_query


def main() -> None:
    state = get_app_state()
    for scenario in state.scenarios:
        timings = [run_query(scenario["question"]).execution_time_ms for _ in range(3)]
        print(f"Scenario {scenario['id']} p50 ~= {statistics.median(timings):.0f} ms")


if __name__ == "__main__":
    main()
