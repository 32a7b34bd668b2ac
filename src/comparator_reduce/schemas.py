"""Pydantic data models used throughout the package."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Scored(BaseModel):
    """An arbitrary item paired with a numeric score."""

    item: Any
    score: float
    meta: Dict[str, Any] = Field(default_factory=dict)


class ReductionRecord(BaseModel):
    """A single logged reduction run."""

    timestamp: str
    comparator: str
    items: List[Any]
    result: Any
    index: int


__all__ = ["Scored", "ReductionRecord"]
