"""
Traversal algorithms over a dependency map: transitive closure, bounded tree construction, whole-graph cycle detection and depth computation.

All walks run on explicit stacks so chains deeper than the interpreter recursion
limit are handled. The closure uses one visited set for the whole call; tree
construction and depth computation track only the assets on the current path,
so shared sub-graphs are revisited once per path that reaches them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator, List, Set, Tuple

from engine.dependency.models import DependencyTree
from engine.dependency.store import DependencyMap

log = logging.getLogger(__name__)

_DONE = object()


class _Color(Enum):
    gray = 1
    black = 2


def get_all_dependencies(store: DependencyMap, asset: str) -> List[str]:
    result: List[str] = []
    discovered: Set[str] = set()
    visited: Set[str] = {asset}
    stack: List[Iterator[str]] = [iter(store.get_dependencies(asset))]

    while stack:
        dep = next(stack[-1], _DONE)
        if dep is _DONE:
            stack.pop()
            continue
        if dep not in discovered:
            discovered.add(dep)
            result.append(dep)
        if dep not in visited:
            visited.add(dep)
            stack.append(iter(store.get_dependencies(dep)))

    log.debug("closure of %s: %d assets", asset, len(result))
    return result


def build_dependency_tree(store: DependencyMap, asset: str, max_depth: int) -> DependencyTree:
    on_path: Set[str] = set()

    def make_node(name: str, depth: int) -> Tuple[DependencyTree, bool]:
        # circularity wins over the depth cut-off
        if name in on_path:
            return DependencyTree(asset=name, depth=depth, is_circular=True), False
        if depth >= max_depth:
            return DependencyTree(asset=name, depth=depth), False
        return DependencyTree(asset=name, depth=depth), True

    root, expand = make_node(asset, 0)
    if not expand:
        return root

    on_path.add(asset)
    stack: List[Tuple[DependencyTree, Iterator[str]]] = [(root, iter(store.get_dependencies(asset)))]

    while stack:
        node, deps = stack[-1]
        dep = next(deps, _DONE)
        if dep is _DONE:
            stack.pop()
            on_path.discard(node.asset)
            continue
        child, expand = make_node(dep, node.depth + 1)
        node.children.append(child)
        if expand:
            on_path.add(dep)
            stack.append((child, iter(store.get_dependencies(dep))))

    return root


def detect_circular_dependencies(store: DependencyMap) -> List[List[str]]:
    """Three-color DFS over every asset that has outgoing edges.

    Each back-edge (an edge into an asset still on the active path) yields the
    path suffix from that asset to the current one. Cycles are not rotated or
    deduplicated across back-edges.
    """
    cycles: List[List[str]] = []
    color: Dict[str, _Color] = {}

    for start in store:
        if start in color:
            continue

        path: List[str] = [start]
        position: Dict[str, int] = {start: 0}
        color[start] = _Color.gray
        stack: List[Iterator[str]] = [iter(store.get_dependencies(start))]

        while stack:
            dep = next(stack[-1], _DONE)
            if dep is _DONE:
                stack.pop()
                finished = path.pop()
                del position[finished]
                color[finished] = _Color.black
                continue

            state = color.get(dep)
            if state is None:
                color[dep] = _Color.gray
                position[dep] = len(path)
                path.append(dep)
                stack.append(iter(store.get_dependencies(dep)))
            elif state is _Color.gray:
                cycles.append(path[position[dep]:])

    log.debug("cycle scan over %d assets found %d cycles", len(store), len(cycles))
    return cycles


def calculate_max_depth(store: DependencyMap, asset: str) -> int:
    """Longest chain below ``asset``, counting the asset itself.

    A leaf has depth 1. A dependency already on the current path contributes
    0, so cycles stop the walk without adding to the depth.
    """
    on_path: Set[str] = {asset}
    # frame: [asset, remaining deps, deepest child so far]
    stack: List[list] = [[asset, iter(store.get_dependencies(asset)), 0]]
    depth = 0

    while stack:
        frame = stack[-1]
        dep = next(frame[1], _DONE)
        if dep is _DONE:
            stack.pop()
            on_path.discard(frame[0])
            value = frame[2] + 1
            if stack:
                stack[-1][2] = max(stack[-1][2], value)
            else:
                depth = value
            continue
        if dep in on_path:
            continue
        on_path.add(dep)
        stack.append([dep, iter(store.get_dependencies(dep)), 0])

    return depth
