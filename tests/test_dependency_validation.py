"""
Test Suite for Dependency Map Validation and Optimization

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.dependency.optimize import optimize
from engine.dependency.store import DependencyMap
from engine.dependency.validation import find_issues, validate
from engine.enums import IssueKind


def test_validate_clean_map():
    assert validate(DependencyMap({"A": ["B"], "B": ["C"]})) == []


def test_validate_self_reference_is_also_a_cycle():
    issues = validate(DependencyMap({"A": ["A"]}))
    assert issues == [
        "Self-reference detected: A depends on itself",
        "Circular dependency detected: A",
    ]


def test_validate_renders_cycle_path():
    issues = validate(DependencyMap({"A": ["B"], "B": ["C"], "C": ["A"]}))
    assert issues == ["Circular dependency detected: A -> B -> C"]


def test_validate_flags_empty_entries():
    store = DependencyMap({"A": [], "B": ["C"]})
    assert validate(store) == ["Asset A has empty dependency list"]
    assert [i.kind for i in find_issues(store)] == [IssueKind.empty_entry]


def test_optimize_sorts_dedups_and_drops_empty():
    store = DependencyMap({"A": ["C", "B", "C", "B"], "D": [], "E": ["F"]})
    removed = optimize(store)

    assert removed == 2
    assert store.get_dependencies("A") == ["B", "C"]
    assert "D" not in store
    assert store.get_dependencies("E") == ["F"]
    assert validate(store) == []


def test_optimize_is_idempotent():
    store = DependencyMap({"A": ["Z", "Y", "Z"], "B": ["A", "A"]})
    optimize(store)
    snapshot = store.copy()

    assert optimize(store) == 0
    assert store == snapshot
    for asset, deps in store.items():
        assert deps == sorted(set(deps))
