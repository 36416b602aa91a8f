"""Keyword rules mapping questions onto retrieval functions.

A rule matches when every keyword group has at least one keyword present in the
lower-cased question. Rules run in ascending priority; the fallback rule has no
keyword groups and must carry the highest priority number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

ParameterExtractor = Callable[[str], Dict[str, Optional[str]]]


@dataclass(frozen=True)
class SelectionRule:
    name: str
    priority: int
    function: str
    keyword_groups: Tuple[Tuple[str, ...], ...]
    extract: ParameterExtractor
    reasoning: str
    fallback: bool = False

    def matches(self, question: str) -> bool:
        """`question` must already be lower-cased."""
        if self.fallback:
            return True
        return all(any(keyword in question for keyword in group) for group in self.keyword_groups)


def _fixed(**params: Optional[str]) -> ParameterExtractor:
    return lambda _question: dict(params)


def _design_history_params(question: str) -> Dict[str, Optional[str]]:
    return {"productName": "갑상선암" if "갑상선암" in question else ""}


def _yearly_params(question: str) -> Dict[str, Optional[str]]:
    return {"year": "2024" if "2024" in question else None}


DEFAULT_RULES: Tuple[SelectionRule, ...] = (
    SelectionRule(
        name="assumption_impact",
        priority=10,
        function="findProductsByAssumption",
        keyword_groups=(("발생률",), ("영향", "바꾸")),
        extract=_fixed(assumptionName="갑상선암 발생률"),
        reasoning="가정 변경에 따른 영향을 받는 상품을 찾는 질문이므로 findProductsByAssumption 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="premium_statistics",
        priority=20,
        function="getProductPremiumStatistics",
        keyword_groups=(("보험료",), ("통계",)),
        extract=_fixed(year="2024", productType="thyroidCancer"),
        reasoning="보험료 통계를 요청하는 질문이므로 getProductPremiumStatistics 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="design_history",
        priority=30,
        function="getProductDesignHistory",
        keyword_groups=(("설계",), ("이력",)),
        extract=_design_history_params,
        reasoning="상품 설계 이력을 조회하는 질문이므로 getProductDesignHistory 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="financial_metrics",
        priority=40,
        function="getFinancialMetrics",
        keyword_groups=(("irr", "수익률", "재무"),),
        extract=_fixed(year="2024", productName=""),
        reasoning="재무 지표를 조회하는 질문이므로 getFinancialMetrics 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="risk_metrics",
        priority=50,
        function="getRiskMetrics",
        keyword_groups=(("리스크", "클레임"),),
        extract=_fixed(year="2024", productType=""),
        reasoning="리스크 지표를 조회하는 질문이므로 getRiskMetrics 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="contract_statistics",
        priority=60,
        function="getContractStatistics",
        keyword_groups=(("계약",), ("통계",)),
        extract=_fixed(year="2024", productName=""),
        reasoning="계약 통계를 조회하는 질문이므로 getContractStatistics 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="yearly_statistics",
        priority=70,
        function="getYearlyStatistics",
        keyword_groups=(("연도별", "년도별"),),
        extract=_yearly_params,
        reasoning="연도별 통계를 조회하는 질문이므로 getYearlyStatistics 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="keyword_search",
        priority=80,
        function="searchProductByKeyword",
        keyword_groups=(("검색", "찾"),),
        extract=_fixed(keyword="갑상선암"),
        reasoning="상품 검색 질문이므로 searchProductByKeyword 함수를 선택했습니다.",
    ),
    SelectionRule(
        name="fallback",
        priority=1000,
        function="searchProductByKeyword",
        keyword_groups=(),
        extract=_fixed(keyword="건강보험"),
        reasoning="일반적인 검색 질문으로 판단하여 searchProductByKeyword 함수를 선택했습니다.",
        fallback=True,
    ),
)
