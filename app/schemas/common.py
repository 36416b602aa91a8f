from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    explicit_memory = "explicit_memory"
    precomputed_statistics = "precomputed_statistics"


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serialises with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
