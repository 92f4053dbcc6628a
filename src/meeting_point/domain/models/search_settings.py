"""Search settings domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OptimizationMode(str, Enum):
    """What the ranking minimizes across the group."""

    MIN_TOTAL = "total"
    MIN_MAX = "max"


class SearchSettings(BaseModel):
    """Caller-owned parameters of a single meeting point search."""

    model_config = ConfigDict(frozen=True)

    mode: OptimizationMode = OptimizationMode.MIN_TOTAL
    candidate_count: int = Field(default=50, gt=0)
    result_count: int = Field(default=5, gt=0)
