from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

import yaml
from dotenv import load_dotenv

from core.pipeline.runner import QueryRunner
from core.retrieval.functions import build_registry
from core.retrieval.registry import RetrievalRegistry
from core.selector.intent_selector import IntentSelector
from storage.dataset import Dataset, load_dataset

ROOT = Path(__file__).resolve().parent.parent

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


@dataclass
class AppState:
    app_cfg: Dict
    dataset: Dataset
    registry: RetrievalRegistry
    selector: IntentSelector
    runner: QueryRunner
    scenarios: List[Dict] = field(default_factory=list)


def _dataset_dir(app_cfg: Dict) -> Path:
    raw = os.getenv("LAB_DATASET_DIR") or app_cfg.get("dataset", {}).get("dir", "data")
    path = Path(raw)
    return path if path.is_absolute() else ROOT / path


def get_log_level(app_cfg: Dict) -> str:
    return (os.getenv("LAB_LOG_LEVEL") or app_cfg.get("logging", {}).get("level", "INFO")).upper()


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    app_cfg = _load_yaml(ROOT / "config" / "app.yaml")
    scenario_cfg = _load_yaml(ROOT / "config" / "scenarios.yaml")

    dataset_cfg = app_cfg.get("dataset", {})
    base = _dataset_dir(app_cfg)
    dataset = load_dataset(
        base / dataset_cfg.get("explicit_memory", "explicit_memory.json"),
        base / dataset_cfg.get("precomputed_statistics", "precomputed_statistics.json"),
    )
    registry = build_registry(dataset)
    selector = IntentSelector()
    runner = QueryRunner(selector, registry)
    missing = runner.check_consistency()
    if missing:
        logger.warning("Selection rules reference unregistered functions: %s", ", ".join(missing))
    return AppState(
        app_cfg=app_cfg,
        dataset=dataset,
        registry=registry,
        selector=selector,
        runner=runner,
        scenarios=scenario_cfg.get("scenarios", []),
    )


def get_app_cfg() -> Dict:
    return get_app_state().app_cfg


def get_registry() -> RetrievalRegistry:
    return get_app_state().registry


def get_runner() -> QueryRunner:
    return get_app_state().runner


def get_scenarios() -> List[Dict]:
    return get_app_state().scenarios
