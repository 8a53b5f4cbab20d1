"""
Consistency checks over a dependency map. Problems are reported as diagnostics rather than raised.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from engine.dependency.store import DependencyMap
from engine.dependency.traversal import detect_circular_dependencies
from engine.enums import IssueKind


@dataclass(frozen=True)
class ValidationIssue:
    kind: IssueKind
    message: str


def find_issues(store: DependencyMap) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    for asset, deps in store.items():
        if asset in deps:
            issues.append(ValidationIssue(
                kind=IssueKind.self_reference,
                message=f"Self-reference detected: {asset} depends on itself",
            ))

    for cycle in detect_circular_dependencies(store):
        issues.append(ValidationIssue(
            kind=IssueKind.circular,
            message=f"Circular dependency detected: {' -> '.join(cycle)}",
        ))

    # only reachable through a raw import; the edge API never leaves empty lists
    for asset, deps in store.items():
        if not deps:
            issues.append(ValidationIssue(
                kind=IssueKind.empty_entry,
                message=f"Asset {asset} has empty dependency list",
            ))

    return issues


def validate(store: DependencyMap) -> List[str]:
    return [issue.message for issue in find_issues(store)]
