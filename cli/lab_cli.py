"""Command-line utility for asking questions and calling retrieval functions directly."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from app.deps import get_app_cfg, get_app_state, get_log_level
from app.services.function_service import call_function, list_functions
from app.services.query_service import run_parallel, run_query
from app.services.scenario_service import list_scenarios
from core.retrieval.registry import FunctionNotFoundError


def _dump(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _parse_params(pairs: List[str]) -> Dict[str, Optional[str]]:
    """Turn key=value pairs into a parameter mapping; a bare key maps to None."""
    params: Dict[str, Optional[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not key:
            raise ValueError(f"Invalid parameter: {pair!r}")
        params[key] = value if sep else None
    return params


def cmd_ask(args: argparse.Namespace) -> None:
    """Run the full selection → retrieval → response pipeline and print the report."""
    if args.parallel:
        _dump([report.to_dict() for report in run_parallel(args.question)])
        return
    report = run_query(args.question)
    if args.text:
        print(report.response)
        return
    _dump(report.to_dict())


def cmd_functions(_args: argparse.Namespace) -> None:
    _dump({"functions": list_functions()})


def cmd_call(args: argparse.Namespace) -> int:
    """Execute one retrieval function with explicit parameters."""
    try:
        result = call_function(args.name, _parse_params(args.param or []))
    except (FunctionNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    _dump(result.to_dict())
    return 0


def cmd_scenarios(_args: argparse.Namespace) -> None:
    _dump({"scenarios": list_scenarios()})


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="retrieval-lab")
    sub = parser.add_subparsers(dest="command")

    ask_p = sub.add_parser("ask")
    ask_p.add_argument("--question", required=True)
    ask_p.add_argument("--parallel", action="store_true", help="Run two independent executions")
    ask_p.add_argument("--text", action="store_true", help="Print only the response sentence")
    ask_p.set_defaults(func=cmd_ask)

    functions_p = sub.add_parser("functions")
    functions_p.set_defaults(func=cmd_functions)

    call_p = sub.add_parser("call")
    call_p.add_argument("name")
    call_p.add_argument("--param", action="append", help="key=value; repeatable")
    call_p.set_defaults(func=cmd_call)

    scenarios_p = sub.add_parser("scenarios")
    scenarios_p.set_defaults(func=cmd_scenarios)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point invoked via `python -m cli.lab_cli ...`."""
    get_app_state()  # ensure initialization
    logging.basicConfig(level=get_log_level(get_app_cfg()))
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
