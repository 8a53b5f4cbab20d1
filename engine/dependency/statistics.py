"""
Roster-wide dependency statistics: orphaned assets, most referenced assets, summary snapshots and per-asset analysis.

The dependency map only knows assets that appear on an edge, so every roster-wide
figure takes the list of all known asset names as an explicit argument.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence, Tuple

from config import settings
from engine.dependency.models import DependencyAnalysis, DependencyStatistics
from engine.dependency.store import DependencyMap
from engine.dependency.traversal import (
    build_dependency_tree,
    calculate_max_depth,
    detect_circular_dependencies,
)


def find_orphaned_assets(store: DependencyMap, all_assets: Sequence[str]) -> List[str]:
    referenced = store.referenced_assets()
    return [a for a in all_assets if a not in store and a not in referenced]


def get_most_referenced_assets(store: DependencyMap, limit: int) -> List[Tuple[str, int]]:
    counts: Counter[str] = Counter(dep for _, dep in store.edges())
    # equal counts fall back to name order so rankings are reproducible
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[: max(limit, 0)]


def generate_statistics(
    store: DependencyMap,
    all_assets: Sequence[str],
    limit: Optional[int] = None,
) -> DependencyStatistics:
    if limit is None:
        limit = settings.most_referenced_limit

    max_depth = max((calculate_max_depth(store, a) for a in all_assets), default=0)

    return DependencyStatistics(
        total_dependencies=store.edge_count(),
        max_depth=max_depth,
        circular_references=detect_circular_dependencies(store),
        orphaned_assets=find_orphaned_assets(store, all_assets),
        most_referenced=get_most_referenced_assets(store, limit),
    )


def analyze_asset_dependencies(
    store: DependencyMap,
    asset: str,
    all_assets: Sequence[str],
) -> DependencyAnalysis:
    return DependencyAnalysis(
        asset_name=asset,
        direct_dependencies=store.get_dependencies(asset),
        reverse_dependencies=store.get_reverse_dependencies(asset),
        dependency_tree=build_dependency_tree(store, asset, settings.analysis_tree_depth),
        statistics=generate_statistics(store, all_assets),
    )
