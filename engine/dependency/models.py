"""
Result types produced by dependency queries: bounded trees, statistics snapshots and per-asset analyses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass
class DependencyTree:
    asset: str
    depth: int
    children: List[DependencyTree] = field(default_factory=list)
    is_circular: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # children are rendered as "dependencies" on the wire
        return {
            "asset": self.asset,
            "depth": self.depth,
            "dependencies": [c.to_dict() for c in self.children],
            "is_circular": self.is_circular,
        }

    def walk(self) -> List[DependencyTree]:
        """Pre-order list of every node in the tree."""
        nodes: List[DependencyTree] = []
        stack: List[DependencyTree] = [self]
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(node.children))
        return nodes


@dataclass(frozen=True)
class DependencyStatistics:
    total_dependencies: int
    max_depth: int
    circular_references: List[List[str]] = field(default_factory=list)
    orphaned_assets: List[str] = field(default_factory=list)
    most_referenced: List[Tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_dependencies": self.total_dependencies,
            "max_depth": self.max_depth,
            "circular_references": [list(c) for c in self.circular_references],
            "orphaned_assets": list(self.orphaned_assets),
            "most_referenced": [[asset, count] for asset, count in self.most_referenced],
        }


@dataclass(frozen=True)
class DependencyAnalysis:
    asset_name: str
    direct_dependencies: List[str]
    reverse_dependencies: List[str]
    dependency_tree: DependencyTree
    statistics: DependencyStatistics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset_name": self.asset_name,
            "direct_dependencies": list(self.direct_dependencies),
            "reverse_dependencies": list(self.reverse_dependencies),
            "dependency_tree": self.dependency_tree.to_dict(),
            "statistics": self.statistics.to_dict(),
        }
