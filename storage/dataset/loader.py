"""Loader for the explicit-memory and precomputed-statistics JSON documents."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Raised when a dataset document is missing or malformed."""


@dataclass(frozen=True)
class Dataset:
    """Both dataset documents, treated as read-only after loading."""

    explicit_memory: Dict[str, Any]
    precomputed_statistics: Dict[str, Any]

    @property
    def products(self) -> List[Dict[str, Any]]:
        return self.explicit_memory.get("productAssumptionConnections", [])

    @property
    def assumption_relationships(self) -> List[Dict[str, Any]]:
        return self.explicit_memory.get("assumptionRelationships", [])

    def year_statistics(self, year: str | None) -> Dict[str, Any] | None:
        """Return the per-year product statistics block, or None for unknown years."""
        if not year:
            return None
        return self.precomputed_statistics.get("productStatistics", {}).get(year)

    def products_for_year(self, year: str | None) -> List[Dict[str, Any]]:
        """Thyroid-cancer products followed by all-health products for the year."""
        year_data = self.year_statistics(year)
        if not year_data:
            return []
        return [*year_data.get("thyroidCancerProducts", []), *year_data.get("allHealthProducts", [])]

    @property
    def aggregated(self) -> Dict[str, Any]:
        return self.precomputed_statistics.get("aggregatedStatistics", {})


_REQUIRED_KEYS = {
    "explicit_memory": ("productAssumptionConnections", "assumptionRelationships"),
    "precomputed_statistics": ("productStatistics", "aggregatedStatistics"),
}


def _read_json(path: Path, label: str) -> Dict[str, Any]:
    if not path.exists():
        raise DatasetError(f"{label} document not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{label} document is not valid JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise DatasetError(f"{label} document must be a JSON object: {path}")
    missing = [key for key in _REQUIRED_KEYS[label] if key not in payload]
    if missing:
        raise DatasetError(f"{label} document {path} is missing keys: {', '.join(missing)}")
    return payload


def load_dataset(explicit_memory_path: Path, precomputed_statistics_path: Path) -> Dataset:
    """Read both documents from disk and return an immutable Dataset."""
    explicit_memory = _read_json(explicit_memory_path, "explicit_memory")
    precomputed = _read_json(precomputed_statistics_path, "precomputed_statistics")
    logger.debug(
        "Loaded dataset with %d products and %d statistic years",
        len(explicit_memory["productAssumptionConnections"]),
        len(precomputed["productStatistics"]),
    )
    return Dataset(explicit_memory=explicit_memory, precomputed_statistics=precomputed)
