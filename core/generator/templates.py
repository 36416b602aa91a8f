"""Templated natural-language summaries of retrieval results.

Stands in for the language-model response step: a fixed delay followed by a
per-function sentence template. Missing record fields raise KeyError.
"""

from __future__ import annotations

import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, List

from core.retrieval.registry import RetrievalResult

# Simulated generation latency, in seconds.
RESPONSE_DELAY_S = 0.2

NO_RESULTS = "조회 결과가 없습니다."

Record = Dict[str, Any]


def _half_up(value: float, step: str) -> Decimal:
    """Round the shortest decimal form of `value` half-up, as JS number formatting does."""
    return Decimal(repr(value)).quantize(Decimal(step), rounding=ROUND_HALF_UP)


def format_number(value: Any) -> str:
    """Thousands separators and at most three fraction digits, like JS toLocaleString()."""
    if isinstance(value, int):
        return f"{value:,}"
    rounded = _half_up(float(value), "0.001")
    if rounded == rounded.to_integral_value():
        return f"{int(rounded):,}"
    return f"{rounded:,.3f}".rstrip("0").rstrip(".")


def _plain_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _percent(ratio: float) -> str:
    return f"{_half_up(ratio * 100, '0.1'):.1f}"


def _assumption_impact(results: List[Record]) -> str:
    products = ", ".join(r["productName"] for r in results)
    return (
        f"갑상선암 발생률 변경 시 영향을 받는 상품은 다음과 같습니다: {products}. "
        f"총 {len(results)}개의 상품이 해당 가정을 사용하고 있습니다."
    )


def _premium_statistics(results: List[Record]) -> str:
    premiums = ", ".join(
        f"{r['productName']}: 평균 {format_number(r['premiumStats']['averageMonthlyPremium'])}원" for r in results
    )
    return f"2024년 갑상선암 상품들의 보험료 통계입니다: {premiums}"


def _financial_metrics(results: List[Record]) -> str:
    metrics = ", ".join(
        f"{r['productName']}: IRR {_percent(r['financialMetrics']['IRR'])}%, "
        f"수익률 {_percent(r['financialMetrics']['profitMargin'])}%"
        for r in results
    )
    return f"재무 지표 조회 결과: {metrics}"


def _risk_metrics(results: List[Record]) -> str:
    risks = ", ".join(
        f"{r['productName']}: 클레임 빈도 {_plain_number(r['riskMetrics']['claimFrequency'])}, "
        f"평균 클레임 {format_number(r['riskMetrics']['averageClaimAmount'])}원"
        for r in results
    )
    return f"리스크 지표 조회 결과: {risks}"


def _generic(results: List[Record]) -> str:
    return f"조회가 완료되었습니다. 총 {len(results)}개의 결과를 찾았습니다."


TEMPLATES: Dict[str, Callable[[List[Record]], str]] = {
    "findProductsByAssumption": _assumption_impact,
    "getProductPremiumStatistics": _premium_statistics,
    "getFinancialMetrics": _financial_metrics,
    "getRiskMetrics": _risk_metrics,
}


def render(question: str, result: RetrievalResult) -> str:
    """Summarise a retrieval result as one sentence; `question` is accepted but unused."""
    time.sleep(RESPONSE_DELAY_S)
    if not result.results:
        return NO_RESULTS
    template = TEMPLATES.get(result.function_used, _generic)
    return template(result.results)
