"""
In-place normalization of a dependency map.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging

from engine.dependency.store import DependencyMap

log = logging.getLogger(__name__)


def optimize(store: DependencyMap) -> int:
    """Sort and deduplicate every dependency list, then drop empty entries.

    Returns the number of duplicate edges removed. Insertion order within each
    list is replaced by sorted order. A second call is a no-op returning 0.
    """
    removed = 0
    emptied = 0

    for asset, deps in store.items():
        unique = sorted(set(deps))
        removed += len(deps) - len(unique)
        if unique:
            store.replace_dependencies(asset, unique)
        else:
            store.drop_asset(asset)
            emptied += 1

    if removed or emptied:
        log.info("optimize removed %d duplicate edges and %d empty entries", removed, emptied)
    return removed
