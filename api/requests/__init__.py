from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class DependencyEdgeRequest(BaseModel):
    asset: str = Field(min_length=1)
    dependency: str = Field(min_length=1)


class RosterRequest(BaseModel):
    assets: List[str] = Field(default_factory=list)


class StatisticsRequest(RosterRequest):
    limit: Optional[int] = Field(default=None, ge=0)


class AnalyzeRequest(RosterRequest):
    asset: str = Field(min_length=1)


class FilterRequest(BaseModel):
    substrings: List[str] = Field(min_length=1)


class ImportRequest(BaseModel):
    dependencies: Dict[str, List[str]] = Field(default_factory=dict)
