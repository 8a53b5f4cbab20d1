"""
Test Suite for the Dependency Map Store

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.dependency.store import DependencyMap


def test_add_dependency_is_visible_both_ways():
    store = DependencyMap()
    store.add_dependency("A", "B")
    assert "B" in store.get_dependencies("A")
    assert "A" in store.get_reverse_dependencies("B")


def test_add_dependency_keeps_duplicates():
    store = DependencyMap()
    store.add_dependency("A", "B")
    store.add_dependency("A", "B")
    assert store.get_dependencies("A") == ["B", "B"]
    assert store.edge_count() == 2


def test_remove_dependency_drops_all_occurrences_and_empty_key():
    store = DependencyMap()
    for dep in ("B", "C", "B"):
        store.add_dependency("A", dep)

    store.remove_dependency("A", "B")
    assert store.get_dependencies("A") == ["C"]

    store.remove_dependency("A", "C")
    assert "A" not in store
    assert len(store) == 0


def test_remove_dependency_unknown_asset_is_noop():
    store = DependencyMap({"A": ["B"]})
    store.remove_dependency("missing", "B")
    store.remove_dependency("A", "missing")
    assert store.get_dependencies("A") == ["B"]


def test_get_dependencies_returns_copy():
    store = DependencyMap({"A": ["B"]})
    deps = store.get_dependencies("A")
    deps.append("C")
    assert store.get_dependencies("A") == ["B"]
    assert store.get_dependencies("nope") == []


def test_reverse_dependencies_follow_key_insertion_order():
    store = DependencyMap()
    store.add_dependency("X", "T")
    store.add_dependency("A", "T")
    store.add_dependency("M", "other")
    assert store.get_reverse_dependencies("T") == ["X", "A"]
    assert store.get_reverse_dependencies("unreferenced") == []


def test_assets_lists_keys_and_dangling_targets():
    store = DependencyMap({"A": ["B", "C"], "C": ["D"]})
    assert store.assets() == ["A", "B", "C", "D"]
    assert store.referenced_assets() == {"B", "C", "D"}


def test_identifiers_are_case_sensitive():
    store = DependencyMap({"Hero": ["Texture"]})
    assert store.get_dependencies("hero") == []
    assert store.get_reverse_dependencies("texture") == []


def test_from_dict_accepts_wrapped_and_bare_shapes():
    wrapped = DependencyMap.from_dict({"dependencies": {"A": ["B"]}})
    bare = DependencyMap.from_dict({"A": ["B"]})
    assert wrapped == bare
    assert wrapped.to_dict() == {"dependencies": {"A": ["B"]}}


def test_from_dict_bare_map_may_name_an_asset_dependencies():
    store = DependencyMap.from_dict({"dependencies": ["X"], "A": ["dependencies"]})
    assert store.get_dependencies("dependencies") == ["X"]
    assert store.get_reverse_dependencies("dependencies") == ["A"]


def test_from_dict_keeps_empty_entries():
    store = DependencyMap.from_dict({"dependencies": {"A": []}})
    assert "A" in store
    assert store.edge_count() == 0


@pytest.mark.parametrize("raw", [[], {"A": "B"}, {"dependencies": "X"}])
def test_from_dict_rejects_malformed_input(raw):
    with pytest.raises(ValueError):
        DependencyMap.from_dict(raw)


def test_copy_is_independent():
    store = DependencyMap({"A": ["B"]})
    clone = store.copy()
    clone.add_dependency("A", "C")
    assert store.get_dependencies("A") == ["B"]
    assert clone.get_dependencies("A") == ["B", "C"]
