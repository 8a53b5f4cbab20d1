"""
Text renderings of a dependency map for visualization and interchange (JSON, GraphViz DOT, CSV) plus a markdown summary report.

Edges are emitted grouped by source asset in name order, keeping each list's own
order and any duplicates that have not been optimized away.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import csv
import io
import json
import logging
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from config import CSV_HEADER, DOT_GRAPH_NAME, REPORT_TITLE, YAML_PLACEHOLDER
from engine.dependency.statistics import generate_statistics
from engine.dependency.store import DependencyMap
from engine.enums import ExportFormat
from engine.exceptions import UnsupportedFormat

log = logging.getLogger(__name__)


def _sorted_edges(store: DependencyMap) -> Iterator[Tuple[str, str]]:
    for asset, deps in sorted(store.items()):
        for dep in deps:
            yield asset, dep


def _dot_quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def export_json(store: DependencyMap) -> str:
    return json.dumps(store.to_dict(), indent=2, sort_keys=True)


def export_dot(store: DependencyMap) -> str:
    lines: List[str] = [
        f"digraph {DOT_GRAPH_NAME} {{",
        "    rankdir=LR;",
        "    node [shape=box, style=rounded];",
        "",
    ]
    for asset in sorted(store.assets()):
        lines.append(f"    {_dot_quote(asset)};")
    lines.append("")
    for asset, dep in _sorted_edges(store):
        lines.append(f"    {_dot_quote(asset)} -> {_dot_quote(dep)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_csv(store: DependencyMap) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(_sorted_edges(store))
    return buf.getvalue()


def _export_yaml(store: DependencyMap) -> str:
    return YAML_PLACEHOLDER


_EXPORTERS: Dict[ExportFormat, Callable[[DependencyMap], str]] = {
    ExportFormat.json: export_json,
    ExportFormat.dot: export_dot,
    ExportFormat.csv: export_csv,
    ExportFormat.yaml: _export_yaml,
}


def export_to_format(store: DependencyMap, format_name: str) -> str:
    fmt = ExportFormat.parse(format_name)
    if fmt is None:
        log.warning("export requested in unsupported format %r", format_name)
        raise UnsupportedFormat(format_name)
    return _EXPORTERS[fmt](store)


def generate_markdown_report(store: DependencyMap, all_assets: Sequence[str]) -> str:
    stats = generate_statistics(store, all_assets)
    lines: List[str] = []

    lines.append(REPORT_TITLE)
    lines.append("")
    lines.append(f"- **Total Dependencies**: {stats.total_dependencies}")
    lines.append(f"- **Maximum Depth**: {stats.max_depth}")
    lines.append(f"- **Circular References**: {len(stats.circular_references)}")
    lines.append(f"- **Orphaned Assets**: {len(stats.orphaned_assets)}")
    lines.append("")

    if stats.most_referenced:
        lines.append("## Most Referenced Assets")
        lines.append("")
        for asset, count in stats.most_referenced:
            lines.append(f"- **{asset}**: {count} references")
        lines.append("")

    if stats.circular_references:
        lines.append("## Circular Dependencies")
        lines.append("")
        for cycle in stats.circular_references:
            lines.append(f"- {' → '.join(cycle)}")
        lines.append("")

    if stats.orphaned_assets:
        lines.append("## Orphaned Assets")
        lines.append("")
        for asset in stats.orphaned_assets:
            lines.append(f"- {asset}")

    return "\n".join(lines) + "\n"
