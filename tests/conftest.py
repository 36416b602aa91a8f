from __future__ import annotations

from pathlib import Path

import pytest

from core.retrieval.functions import build_registry
from storage.dataset import load_dataset

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def no_delay(monkeypatch):
    """Remove the simulated selection/generation latency."""
    monkeypatch.setattr("core.selector.intent_selector.SELECTION_DELAY_S", 0)
    monkeypatch.setattr("core.generator.templates.RESPONSE_DELAY_S", 0)


@pytest.fixture(scope="session")
def dataset():
    return load_dataset(DATA_DIR / "explicit_memory.json", DATA_DIR / "precomputed_statistics.json")


@pytest.fixture(scope="session")
def registry(dataset):
    return build_registry(dataset)
