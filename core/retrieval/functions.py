"""Retrieval functions over the explicit-memory and precomputed-statistics dataset.

Each handler takes the dataset plus a flat parameter mapping and returns a list of
records. Handlers only filter and project; interpretation of the records is left
to the response templates. Records are deep copies so callers can never mutate
the shared dataset.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

from core.retrieval.registry import Parameters, RetrievalFunction, RetrievalRegistry
from storage.dataset import Dataset

EXPLICIT_MEMORY = "explicit_memory"
PRECOMPUTED_STATISTICS = "precomputed_statistics"


def _project(product: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    record = {"productId": product["productId"], "productName": product["productName"]}
    for key in keys:
        record[key] = copy.deepcopy(product[key])
    return record


def find_products_by_assumption(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    assumption_name = params.get("assumptionName") or ""
    results = []
    for product in dataset.products:
        matching = [
            copy.deepcopy(assumption)
            for assumption in product["assumptions"]
            if assumption_name in assumption["assumptionName"]
        ]
        if matching:
            record = _project(product, "productType")
            record["matchingAssumptions"] = matching
            results.append(record)
    return results


def get_product_design_history(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    product_name = params.get("productName") or ""
    return [
        _project(product, "designHistory")
        for product in dataset.products
        if product_name in product["productName"]
    ]


def get_assumption_relationships(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    assumption_id = params.get("assumptionId")
    relationships = dataset.assumption_relationships
    if assumption_id:
        relationships = [rel for rel in relationships if rel["assumptionId"] == assumption_id][:1]
    return copy.deepcopy(relationships)


def get_product_premium_statistics(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    year_data = dataset.year_statistics(params.get("year"))
    if not year_data:
        return []
    if params.get("productType") == "thyroidCancer":
        products = year_data.get("thyroidCancerProducts", [])
    else:
        products = year_data.get("allHealthProducts", [])
    return [_project(product, "premiumStats") for product in products]


def get_financial_metrics(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    product_name = params.get("productName") or ""
    return [
        _project(product, "financialMetrics")
        for product in dataset.products_for_year(params.get("year"))
        if product_name in product["productName"]
    ]


def get_risk_metrics(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    # productType is accepted but not used as a filter
    return [_project(product, "riskMetrics") for product in dataset.products_for_year(params.get("year"))]


def get_aggregated_stats_by_type(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    by_type = dataset.aggregated.get("byProductType", {})
    product_type = params.get("productType")
    if product_type and product_type in by_type:
        return [copy.deepcopy(by_type[product_type])]
    return [copy.deepcopy(by_type)]


def get_yearly_statistics(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    by_year = dataset.aggregated.get("byYear", {})
    year = params.get("year")
    if year and year in by_year:
        return [{"year": year, "statistics": copy.deepcopy(by_year[year])}]
    return [{"year": key, "statistics": copy.deepcopy(stats)} for key, stats in by_year.items()]


def search_product_by_keyword(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    keyword = params.get("keyword") or ""
    return [
        _project(product, "productType")
        for product in dataset.products
        if keyword in product["productName"] or keyword.lower() in product["productType"].lower()
    ]


def get_contract_statistics(dataset: Dataset, params: Parameters) -> List[Dict[str, Any]]:
    product_name = params.get("productName") or ""
    return [
        _project(product, "contractStats")
        for product in dataset.products_for_year(params.get("year"))
        if product_name in product["productName"]
    ]


RETRIEVAL_FUNCTIONS = [
    RetrievalFunction(
        name="findProductsByAssumption",
        description="특정 가정(assumption)에 연결된 모든 상품을 찾습니다. 가정 변경 시 영향받는 상품을 파악할 때 사용합니다.",
        category=EXPLICIT_MEMORY,
        handler=find_products_by_assumption,
    ),
    RetrievalFunction(
        name="getProductDesignHistory",
        description="특정 상품의 설계 이력을 조회합니다. 상품의 변경 내역과 담당자 정보를 확인할 때 사용합니다.",
        category=EXPLICIT_MEMORY,
        handler=get_product_design_history,
    ),
    RetrievalFunction(
        name="getAssumptionRelationships",
        description="가정들 간의 관계와 영향도를 조회합니다. 가정 변경의 파급 효과를 분석할 때 사용합니다.",
        category=EXPLICIT_MEMORY,
        handler=get_assumption_relationships,
    ),
    RetrievalFunction(
        name="getProductPremiumStatistics",
        description="특정 상품군의 보험료 통계를 조회합니다. 평균 보험료, 최소/최대값 등의 통계 정보를 제공합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_product_premium_statistics,
    ),
    RetrievalFunction(
        name="getFinancialMetrics",
        description="상품의 재무 지표(IRR, 수익률, 손해율 등)를 조회합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_financial_metrics,
    ),
    RetrievalFunction(
        name="getRiskMetrics",
        description="상품의 리스크 지표(클레임 빈도, 평균 클레임 금액 등)를 조회합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_risk_metrics,
    ),
    RetrievalFunction(
        name="getAggregatedStatsByType",
        description="상품 유형별 집계 통계를 조회합니다. 전체 계약 수, 평균 보험료 등을 제공합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_aggregated_stats_by_type,
    ),
    RetrievalFunction(
        name="getYearlyStatistics",
        description="연도별 전체 통계를 조회합니다. 신규 계약 수, 총 보험료 등을 제공합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_yearly_statistics,
    ),
    RetrievalFunction(
        name="searchProductByKeyword",
        description="키워드로 상품을 검색합니다. 상품명, 상품 유형 등으로 검색 가능합니다.",
        category=EXPLICIT_MEMORY,
        handler=search_product_by_keyword,
    ),
    RetrievalFunction(
        name="getContractStatistics",
        description="계약 관련 통계(총 계약 수, 신규 계약, 해약 등)를 조회합니다.",
        category=PRECOMPUTED_STATISTICS,
        handler=get_contract_statistics,
    ),
]


def build_registry(dataset: Dataset) -> RetrievalRegistry:
    """Bind the standard retrieval functions to a loaded dataset."""
    return RetrievalRegistry(dataset, RETRIEVAL_FUNCTIONS)
