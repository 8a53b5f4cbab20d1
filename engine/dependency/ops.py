"""
Set operations that combine or restrict dependency maps.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from engine.dependency.optimize import optimize
from engine.dependency.store import DependencyMap

log = logging.getLogger(__name__)


def merge(stores: Iterable[DependencyMap]) -> DependencyMap:
    merged = DependencyMap()
    count = 0
    for store in stores:
        count += 1
        for asset, dep in store.edges():
            merged.add_dependency(asset, dep)
    optimize(merged)
    log.info("merged %d dependency maps into %d assets", count, len(merged))
    return merged


def filter_by_name(store: DependencyMap, substrings: Sequence[str]) -> DependencyMap:
    needles = [s.lower() for s in substrings]
    filtered = DependencyMap()
    for asset, deps in store.items():
        name = asset.lower()
        if any(n in name for n in needles):
            for dep in deps:
                filtered.add_dependency(asset, dep)
    return filtered
