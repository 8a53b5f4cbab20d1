"""
Shared dependency map owned by the API process. Every call takes the lock for
its full duration so the engine functions always see exclusive access.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from engine.dependency import (
    DependencyAnalysis,
    DependencyMap,
    DependencyStatistics,
    DependencyTree,
    ValidationIssue,
    analyze_asset_dependencies,
    build_dependency_tree,
    detect_circular_dependencies,
    export_to_format,
    filter_by_name,
    find_issues,
    find_orphaned_assets,
    generate_markdown_report,
    generate_statistics,
    get_all_dependencies,
    get_most_referenced_assets,
    merge,
    optimize,
)

log = logging.getLogger(__name__)


class DependencyService:
    def __init__(self, store: Optional[DependencyMap] = None) -> None:
        self._store = store if store is not None else DependencyMap()
        self._lock = asyncio.Lock()

    async def snapshot(self, asset_name: Optional[str] = None) -> DependencyMap:
        async with self._lock:
            if asset_name is None:
                return self._store.copy()
            if asset_name not in self._store:
                return DependencyMap()
            return DependencyMap({asset_name: self._store.get_dependencies(asset_name)})

    async def size(self) -> Tuple[int, int]:
        async with self._lock:
            return len(self._store), self._store.edge_count()

    async def add(self, asset: str, dependency: str) -> List[str]:
        async with self._lock:
            self._store.add_dependency(asset, dependency)
            log.info("added dependency %s -> %s", asset, dependency)
            return self._store.get_dependencies(asset)

    async def remove(self, asset: str, dependency: str) -> List[str]:
        async with self._lock:
            self._store.remove_dependency(asset, dependency)
            log.info("removed dependency %s -> %s", asset, dependency)
            return self._store.get_dependencies(asset)

    async def import_map(self, incoming: DependencyMap) -> DependencyMap:
        async with self._lock:
            self._store = merge([self._store, incoming])
            return self._store.copy()

    async def reset(self, store: Optional[DependencyMap] = None) -> None:
        async with self._lock:
            self._store = store if store is not None else DependencyMap()

    async def direct(self, asset: str) -> List[str]:
        async with self._lock:
            return self._store.get_dependencies(asset)

    async def reverse(self, asset: str) -> List[str]:
        async with self._lock:
            return self._store.get_reverse_dependencies(asset)

    async def closure(self, asset: str) -> List[str]:
        async with self._lock:
            return get_all_dependencies(self._store, asset)

    async def tree(self, asset: str, max_depth: int) -> DependencyTree:
        async with self._lock:
            return build_dependency_tree(self._store, asset, max_depth)

    async def cycles(self) -> List[List[str]]:
        async with self._lock:
            return detect_circular_dependencies(self._store)

    async def orphans(self, all_assets: Sequence[str]) -> List[str]:
        async with self._lock:
            return find_orphaned_assets(self._store, all_assets)

    async def most_referenced(self, limit: int) -> List[Tuple[str, int]]:
        async with self._lock:
            return get_most_referenced_assets(self._store, limit)

    async def statistics(self, all_assets: Sequence[str], limit: Optional[int] = None) -> DependencyStatistics:
        async with self._lock:
            return generate_statistics(self._store, all_assets, limit)

    async def analyze(self, asset: str, all_assets: Sequence[str]) -> DependencyAnalysis:
        async with self._lock:
            return analyze_asset_dependencies(self._store, asset, all_assets)

    async def validate(self) -> List[ValidationIssue]:
        async with self._lock:
            return find_issues(self._store)

    async def optimize(self) -> int:
        async with self._lock:
            return optimize(self._store)

    async def filtered(self, substrings: Sequence[str]) -> DependencyMap:
        async with self._lock:
            return filter_by_name(self._store, substrings)

    async def export(self, format_name: str) -> str:
        async with self._lock:
            return export_to_format(self._store, format_name)

    async def report(self, all_assets: Sequence[str]) -> str:
        async with self._lock:
            return generate_markdown_report(self._store, all_assets)


dependency_service = DependencyService()
