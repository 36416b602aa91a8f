from __future__ import annotations

import json

from cli.lab_cli import main


def test_functions_command(capsys):
    assert main(["functions"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["functions"]) == 10


def test_ask_command_prints_response_text(capsys, no_delay):
    assert main(["ask", "--question", "보험료 통계 알려줘", "--text"]) == 0
    assert capsys.readouterr().out.startswith("2024년 갑상선암 상품들의 보험료 통계입니다:")


def test_ask_command_prints_report(capsys, no_delay):
    assert main(["ask", "--question", "설계 이력"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["executionPath"]["functionUsed"] == "getProductDesignHistory"


def test_call_command_with_params(capsys):
    assert main(["call", "getAssumptionRelationships", "--param", "assumptionId=C51"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["results"][0]["assumptionName"] == "갑상선암 발생률"


def test_call_unknown_function(capsys):
    assert main(["call", "getWeather"]) == 2
    assert "Function getWeather not found" in capsys.readouterr().err


def test_scenarios_command(capsys):
    assert main(["scenarios"]) == 0
    assert len(json.loads(capsys.readouterr().out)["scenarios"]) == 2
