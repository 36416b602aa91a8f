from __future__ import annotations

import pytest

from core.selector.intent_selector import IntentSelector
from core.selector.rules import DEFAULT_RULES, SelectionRule

pytestmark = pytest.mark.usefixtures("no_delay")


def _rule(name, priority, keywords=(), fallback=False):
    return SelectionRule(
        name=name,
        priority=priority,
        function=f"{name}Function",
        keyword_groups=keywords,
        extract=lambda _q: {},
        reasoning=name,
        fallback=fallback,
    )


def test_assumption_impact_question_selects_assumption_lookup():
    selection = IntentSelector().select("갑상선암 발생률이 바뀌면 어떤 상품이 영향을 받나요?")
    assert selection.selected_function == "findProductsByAssumption"
    assert dict(selection.parameters) == {"assumptionName": "갑상선암 발생률"}
    assert "findProductsByAssumption" in selection.reasoning


@pytest.mark.parametrize(
    "question",
    [
        "발생률을 바꾸면 보험료 통계는 어떻게 되나요?",
        "위암 발생률 변경이 재무 지표에 주는 영향은?",
        "갑상선암 발생률을 바꾸면 클레임이 늘어날까?",
    ],
)
def test_assumption_impact_wins_over_later_rules(question):
    assert IntentSelector().select(question).selected_function == "findProductsByAssumption"


def test_rate_change_without_impact_keyword_reaches_later_rules():
    selector = IntentSelector()
    assert selector.select("발생률이 바뀌면 클레임이 늘어날까?").selected_function == "getRiskMetrics"
    assert selector.match("발생률이 바뀌었나요?") is None


def test_premium_statistics_parameters():
    selection = IntentSelector().select("보험료 통계 알려줘")
    assert selection.selected_function == "getProductPremiumStatistics"
    assert dict(selection.parameters) == {"year": "2024", "productType": "thyroidCancer"}


def test_design_history_extracts_product_name_when_present():
    selector = IntentSelector()
    named = selector.select("갑상선암 상품의 설계 이력을 보여줘")
    assert named.selected_function == "getProductDesignHistory"
    assert named.parameters["productName"] == "갑상선암"
    unnamed = selector.select("설계 이력 조회")
    assert unnamed.parameters["productName"] == ""


@pytest.mark.parametrize(
    "question, expected",
    [
        ("IRR이 가장 높은 상품은?", "getFinancialMetrics"),
        ("상품별 수익률 알려줘", "getFinancialMetrics"),
        ("클레임 현황이 궁금해요", "getRiskMetrics"),
        ("리스크 지표 보여줘", "getRiskMetrics"),
        ("계약 통계 보여줘", "getContractStatistics"),
        ("년도별 실적", "getYearlyStatistics"),
        ("상품 검색", "searchProductByKeyword"),
    ],
)
def test_keyword_rules(question, expected):
    assert IntentSelector().select(question).selected_function == expected


def test_yearly_statistics_year_is_optional():
    selector = IntentSelector()
    assert selector.select("2024 연도별 통계").parameters["year"] == "2024"
    assert selector.select("연도별 실적 2024").parameters["year"] == "2024"
    assert selector.select("연도별 실적").parameters["year"] is None


def test_search_rule_uses_fixed_keyword():
    selection = IntentSelector().select("종합 상품을 찾아줘")
    assert selection.selected_function == "searchProductByKeyword"
    assert selection.parameters["keyword"] == "갑상선암"


@pytest.mark.parametrize("question", ["안녕하세요", "", "what is the weather?"])
def test_unmatched_question_falls_back_to_health_insurance_search(question):
    selection = IntentSelector().select(question)
    assert selection.selected_function == "searchProductByKeyword"
    assert dict(selection.parameters) == {"keyword": "건강보험"}


def test_match_signals_unmatched_questions_explicitly():
    selector = IntentSelector()
    assert selector.match("안녕하세요") is None
    assert selector.match("보험료 통계").selected_function == "getProductPremiumStatistics"


def test_rules_are_ordered_by_priority_not_declaration_order():
    rules = [
        _rule("fallback", 99, fallback=True),
        _rule("late", 20, (("a",),)),
        _rule("early", 10, (("a",), ("b",))),
    ]
    selector = IntentSelector(rules)
    assert selector.select("a b").selected_function == "earlyFunction"
    assert selector.select("a").selected_function == "lateFunction"
    assert selector.select("c").selected_function == "fallbackFunction"


def test_rule_set_validation():
    with pytest.raises(ValueError):
        IntentSelector([])
    with pytest.raises(ValueError):
        IntentSelector([_rule("a", 1, (("x",),)), _rule("b", 1, fallback=True)])
    with pytest.raises(ValueError):
        IntentSelector([_rule("a", 1, (("x",),))])
    with pytest.raises(ValueError):
        IntentSelector([_rule("fallback", 1, fallback=True), _rule("a", 2, (("x",),))])


def test_selection_parameters_are_read_only():
    selection = IntentSelector().select("보험료 통계")
    with pytest.raises(TypeError):
        selection.parameters["year"] = "2023"


def test_functions_lists_each_selectable_function_once():
    functions = IntentSelector(DEFAULT_RULES).functions
    assert functions.count("searchProductByKeyword") == 1
    assert "findProductsByAssumption" in functions
