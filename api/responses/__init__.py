"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from engine.enums import IssueKind


class DependencyMapModel(BaseModel):
    dependencies: Dict[str, List[str]] = Field(default_factory=dict)


class DependencyResponse(BaseModel):

    dependencies: DependencyMapModel


class AssetDependenciesResponse(BaseModel):

    asset: str
    dependencies: List[str]


class DependencyTreeNode(BaseModel):

    asset: str
    depth: int
    dependencies: List[DependencyTreeNode] = Field(default_factory=list)
    is_circular: bool = False


class DependencyStatisticsResponse(BaseModel):

    total_dependencies: int
    max_depth: int
    circular_references: List[List[str]]
    orphaned_assets: List[str]
    most_referenced: List[Tuple[str, int]]


class DependencyAnalysisResponse(BaseModel):

    asset_name: str
    direct_dependencies: List[str]
    reverse_dependencies: List[str]
    dependency_tree: DependencyTreeNode
    statistics: DependencyStatisticsResponse


class CyclesResponse(BaseModel):
    cycles: List[List[str]]
    count: int


class ValidationIssueModel(BaseModel):
    kind: IssueKind
    message: str


class ValidationResponse(BaseModel):
    valid: bool
    issues: List[ValidationIssueModel]


class OptimizeResponse(BaseModel):
    removed: int
    assets: int
    edges: int


class MostReferencedResponse(BaseModel):
    limit: int
    items: List[Tuple[str, int]]


class ReportResponse(BaseModel):
    format: str = "markdown"
    content: str
    asset_count: Optional[int] = None


DependencyTreeNode.model_rebuild()
