"""
Shared helpers for API route modules.

Provides access to the process-wide dependency service and the conversions
from engine result types to response models, keeping individual route files
thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

from api.responses import (
    DependencyMapModel,
    DependencyResponse,
    DependencyStatisticsResponse,
    DependencyTreeNode,
    ValidationIssueModel,
)
from engine.dependency import DependencyMap, DependencyStatistics, DependencyTree, ValidationIssue
from services.dependency_service import DependencyService, dependency_service


def get_service() -> DependencyService:
    return dependency_service


def to_dependency_response(store: DependencyMap) -> DependencyResponse:
    return DependencyResponse(dependencies=DependencyMapModel(**store.to_dict()))


def to_tree_node(tree: DependencyTree) -> DependencyTreeNode:
    return DependencyTreeNode.model_validate(tree.to_dict())


def to_statistics_response(stats: DependencyStatistics) -> DependencyStatisticsResponse:
    return DependencyStatisticsResponse.model_validate(stats.to_dict())


def to_issue_models(issues: List[ValidationIssue]) -> List[ValidationIssueModel]:
    return [ValidationIssueModel(kind=i.kind, message=i.message) for i in issues]
