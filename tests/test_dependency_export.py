"""
Test Suite for Dependency Map Export, Reports and Set Operations

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest

from config import YAML_PLACEHOLDER
from engine.dependency.export import export_to_format, generate_markdown_report
from engine.dependency.ops import filter_by_name, merge
from engine.dependency.store import DependencyMap
from engine.exceptions import DependencyGraphError, UnsupportedFormat


def test_dot_export_declares_nodes_and_edges():
    text = export_to_format(DependencyMap({"A": ["B"]}), "dot")
    lines = text.splitlines()

    assert text.startswith("digraph AssetDependencies {")
    assert '    "A";' in lines
    assert '    "B";' in lines
    assert '    "A" -> "B";' in lines
    assert lines[-1] == "}"


def test_dot_export_keeps_duplicate_edges_until_optimized():
    text = export_to_format(DependencyMap({"A": ["B", "B"]}), "DOT")
    assert text.count('"A" -> "B";') == 2


def test_dot_export_escapes_quotes():
    text = export_to_format(DependencyMap({'Say "hi"': ["B"]}), "dot")
    assert '"Say \\"hi\\"" -> "B";' in text


def test_csv_export_rows_sorted_by_source():
    store = DependencyMap({"B": ["C"], "A": ["B", "B"]})
    assert export_to_format(store, "Csv") == "Asset,Dependency\nA,B\nA,B\nB,C\n"


def test_json_export_round_trips_structure():
    store = DependencyMap({"B": ["C"], "A": ["B"]})
    payload = json.loads(export_to_format(store, "json"))
    assert payload == {"dependencies": {"A": ["B"], "B": ["C"]}}


def test_yaml_export_placeholder():
    assert export_to_format(DependencyMap(), "YAML") == YAML_PLACEHOLDER


def test_unsupported_format_raises():
    with pytest.raises(UnsupportedFormat) as excinfo:
        export_to_format(DependencyMap(), "xml")
    assert isinstance(excinfo.value, DependencyGraphError)
    assert str(excinfo.value) == "Unsupported export format: xml"
    assert excinfo.value.format_name == "xml"


@pytest.mark.parametrize("name", [" csv ", "json\n", "\tdot"])
def test_padded_format_names_are_unsupported(name):
    store = DependencyMap({"A": ["B"]})
    with pytest.raises(UnsupportedFormat):
        export_to_format(store, name)


def test_markdown_report_sections():
    store = DependencyMap({"A": ["B"], "B": ["A"], "C": ["B"]})
    report = generate_markdown_report(store, ["A", "B", "C", "Lonely"])

    assert report.startswith("# Asset Dependency Report")
    assert "- **Total Dependencies**: 3" in report
    assert "- **Orphaned Assets**: 1" in report
    assert "- **B**: 2 references" in report
    assert "## Circular Dependencies" in report
    assert "- A → B" in report
    assert "## Orphaned Assets" in report
    assert "- Lonely" in report


def test_markdown_report_omits_empty_sections():
    report = generate_markdown_report(DependencyMap(), [])
    assert "## Most Referenced Assets" not in report
    assert "## Circular Dependencies" not in report
    assert "## Orphaned Assets" not in report


def test_merge_normalizes_result():
    merged = merge([DependencyMap({"A": ["B"]}), DependencyMap({"A": ["B"]})])
    assert merged.to_dict() == {"dependencies": {"A": ["B"]}}
    assert merged.edge_count() == 1


def test_merge_unions_and_leaves_inputs_untouched():
    first = DependencyMap({"A": ["C", "C"]})
    second = DependencyMap({"A": ["B"], "X": ["Y"]})
    merged = merge([first, second])

    assert merged.get_dependencies("A") == ["B", "C"]
    assert merged.get_dependencies("X") == ["Y"]
    assert first.get_dependencies("A") == ["C", "C"]
    assert len(merge([])) == 0


def test_filter_by_name_matches_source_case_insensitively():
    store = DependencyMap({
        "PlayerMesh": ["T1", "T1"],
        "EnemyMesh": ["PlayerTexture"],
        "UIShader": ["X"],
    })
    filtered = filter_by_name(store, ["player", "SHADER"])

    assert list(filtered) == ["PlayerMesh", "UIShader"]
    assert filtered.get_dependencies("PlayerMesh") == ["T1", "T1"]
    assert len(filter_by_name(store, [])) == 0
