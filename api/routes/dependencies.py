"""
Dependency graph routes: edge mutation, lookups, traversal, statistics, validation, normalization and export over the shared dependency map.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Annotated, Dict, Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from api.requests import (
    AnalyzeRequest,
    DependencyEdgeRequest,
    FilterRequest,
    ImportRequest,
    RosterRequest,
    StatisticsRequest,
)
from api.responses import (
    AssetDependenciesResponse,
    CyclesResponse,
    DependencyAnalysisResponse,
    DependencyResponse,
    DependencyStatisticsResponse,
    DependencyTreeNode,
    MostReferencedResponse,
    OptimizeResponse,
    ReportResponse,
    ValidationResponse,
)
from api.routes.common import (
    get_service,
    to_dependency_response,
    to_issue_models,
    to_statistics_response,
    to_tree_node,
)
from api.routes.exception import handle_exceptions
from config import settings
from engine.dependency import DependencyMap
from engine.enums import ExportFormat

router = APIRouter(tags=["Dependencies"])

_MEDIA_TYPES: Dict[ExportFormat, str] = {
    ExportFormat.json: "application/json",
    ExportFormat.dot: "text/vnd.graphviz",
    ExportFormat.csv: "text/csv",
    ExportFormat.yaml: "text/plain",
}

TreeDepth = Annotated[int, Query(ge=0, le=settings.tree_max_depth_limit)]
RankLimit = Annotated[int, Query(ge=0)]


@router.get("/dependencies", summary="Dependency map, optionally restricted to one asset")
@handle_exceptions
async def list_dependencies(asset_name: Optional[str] = None) -> DependencyResponse:
    return to_dependency_response(await get_service().snapshot(asset_name))


@router.post("/dependencies", summary="Add a dependency edge")
@handle_exceptions
async def add_dependency(req: DependencyEdgeRequest) -> AssetDependenciesResponse:
    deps = await get_service().add(req.asset, req.dependency)
    return AssetDependenciesResponse(asset=req.asset, dependencies=deps)


@router.delete("/dependencies", summary="Remove every occurrence of a dependency edge")
@handle_exceptions
async def remove_dependency(req: DependencyEdgeRequest) -> AssetDependenciesResponse:
    deps = await get_service().remove(req.asset, req.dependency)
    return AssetDependenciesResponse(asset=req.asset, dependencies=deps)


@router.post("/dependencies/import", summary="Merge a dependency map into the shared map")
@handle_exceptions
async def import_dependencies(req: ImportRequest) -> DependencyResponse:
    merged = await get_service().import_map(DependencyMap.from_dict(req.model_dump()))
    return to_dependency_response(merged)


@router.get("/dependencies/cycles", summary="Every circular dependency found by a full graph scan")
@handle_exceptions
async def cycles() -> CyclesResponse:
    found = await get_service().cycles()
    return CyclesResponse(cycles=found, count=len(found))


@router.get("/dependencies/validate", summary="Consistency diagnostics for the dependency map")
@handle_exceptions
async def validate() -> ValidationResponse:
    issues = await get_service().validate()
    return ValidationResponse(valid=not issues, issues=to_issue_models(issues))


@router.get("/dependencies/most-referenced", summary="Assets ranked by incoming edge count")
@handle_exceptions
async def most_referenced(limit: RankLimit = settings.most_referenced_limit) -> MostReferencedResponse:
    items = await get_service().most_referenced(limit)
    return MostReferencedResponse(limit=limit, items=items)


@router.post("/dependencies/optimize", summary="Sort and deduplicate every dependency list")
@handle_exceptions
async def optimize() -> OptimizeResponse:
    service = get_service()
    removed = await service.optimize()
    assets, edges = await service.size()
    return OptimizeResponse(removed=removed, assets=assets, edges=edges)


@router.post("/dependencies/orphans", summary="Roster assets with no incoming or outgoing edges")
@handle_exceptions
async def orphans(req: RosterRequest) -> Dict[str, list]:
    return {"orphaned_assets": await get_service().orphans(req.assets)}


@router.post("/dependencies/statistics", summary="Roster-wide dependency statistics")
@handle_exceptions
async def statistics(req: StatisticsRequest) -> DependencyStatisticsResponse:
    stats = await get_service().statistics(req.assets, req.limit)
    return to_statistics_response(stats)


@router.post("/dependencies/analyze", summary="Direct, reverse, tree and statistics for one asset")
@handle_exceptions
async def analyze(req: AnalyzeRequest) -> DependencyAnalysisResponse:
    analysis = await get_service().analyze(req.asset, req.assets)
    return DependencyAnalysisResponse.model_validate(analysis.to_dict())


@router.post("/dependencies/filter", summary="Edges whose source asset name matches any substring")
@handle_exceptions
async def filter_dependencies(req: FilterRequest) -> DependencyResponse:
    return to_dependency_response(await get_service().filtered(req.substrings))


@router.get("/dependencies/export", summary="Export the dependency map as json, dot, csv or yaml")
@handle_exceptions
async def export(format: str = ExportFormat.json.value) -> PlainTextResponse:
    content = await get_service().export(format)
    fmt = ExportFormat.parse(format) or ExportFormat.json
    return PlainTextResponse(content=content, media_type=_MEDIA_TYPES[fmt])


@router.post("/dependencies/report", summary="Markdown dependency report")
@handle_exceptions
async def report(req: RosterRequest) -> ReportResponse:
    content = await get_service().report(req.assets)
    return ReportResponse(content=content, asset_count=len(req.assets))


@router.get("/dependencies/{asset:path}/reverse", summary="Assets that depend on the given asset")
@handle_exceptions
async def reverse_dependencies(asset: str) -> AssetDependenciesResponse:
    return AssetDependenciesResponse(asset=asset, dependencies=await get_service().reverse(asset))


@router.get("/dependencies/{asset:path}/all", summary="Transitive closure of an asset's dependencies")
@handle_exceptions
async def all_dependencies(asset: str) -> AssetDependenciesResponse:
    return AssetDependenciesResponse(asset=asset, dependencies=await get_service().closure(asset))


@router.get("/dependencies/{asset:path}/tree", summary="Bounded dependency tree with cycle flags")
@handle_exceptions
async def dependency_tree(asset: str, max_depth: TreeDepth = settings.tree_default_depth) -> DependencyTreeNode:
    return to_tree_node(await get_service().tree(asset, max_depth))
