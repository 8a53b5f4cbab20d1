"""
Adjacency store for asset dependencies. Each asset maps to the ordered list of
assets it depends on; duplicate edges are kept until the map is optimized and
edges may point at assets that have no entry of their own.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple


class DependencyMap:
    def __init__(self, dependencies: Mapping[str, Iterable[str]] | None = None) -> None:
        self._deps: Dict[str, List[str]] = {
            asset: list(deps) for asset, deps in (dependencies or {}).items()
        }

    def add_dependency(self, asset: str, dependency: str) -> None:
        self._deps.setdefault(asset, []).append(dependency)

    def remove_dependency(self, asset: str, dependency: str) -> None:
        deps = self._deps.get(asset)
        if deps is None:
            return
        deps[:] = [d for d in deps if d != dependency]
        if not deps:
            del self._deps[asset]

    def get_dependencies(self, asset: str) -> List[str]:
        return list(self._deps.get(asset, ()))

    def get_reverse_dependencies(self, asset: str) -> List[str]:
        return [key for key, deps in self._deps.items() if asset in deps]

    def replace_dependencies(self, asset: str, dependencies: Iterable[str]) -> None:
        self._deps[asset] = list(dependencies)

    def drop_asset(self, asset: str) -> None:
        self._deps.pop(asset, None)

    def assets(self) -> List[str]:
        """Every asset mentioned by an edge, keys and targets, in first-mention order."""
        seen: Dict[str, None] = {}
        for asset, deps in self._deps.items():
            seen.setdefault(asset, None)
            for dep in deps:
                seen.setdefault(dep, None)
        return list(seen)

    def referenced_assets(self) -> set[str]:
        return {dep for deps in self._deps.values() for dep in deps}

    def edge_count(self) -> int:
        return sum(len(deps) for deps in self._deps.values())

    def items(self) -> List[Tuple[str, List[str]]]:
        return [(asset, list(deps)) for asset, deps in self._deps.items()]

    def edges(self) -> Iterator[Tuple[str, str]]:
        for asset, deps in self._deps.items():
            for dep in deps:
                yield asset, dep

    def copy(self) -> DependencyMap:
        return DependencyMap(self._deps)

    def to_dict(self) -> Dict[str, Any]:
        return {"dependencies": {asset: list(deps) for asset, deps in self._deps.items()}}

    @classmethod
    def from_dict(cls, raw: Any) -> DependencyMap:
        """Accepts either ``{"dependencies": {...}}`` or the bare asset mapping.

        A top-level ``"dependencies"`` key is only unwrapped when it holds an
        object, so a bare map may contain an asset with that name.
        """
        if not isinstance(raw, dict):
            raise ValueError("dependency map must be an object")
        wrapped = raw.get("dependencies")
        body = wrapped if isinstance(wrapped, dict) else raw
        parsed: Dict[str, List[str]] = {}
        for asset, deps in body.items():
            if not isinstance(deps, list):
                raise ValueError(f"dependencies for {asset!r} must be a list")
            parsed[str(asset)] = [str(d) for d in deps]
        return cls(parsed)

    def __contains__(self, asset: object) -> bool:
        return asset in self._deps

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._deps))

    def __len__(self) -> int:
        return len(self._deps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyMap):
            return NotImplemented
        return self._deps == other._deps

    def __repr__(self) -> str:
        return f"DependencyMap({self._deps!r})"
