"""
Dependency graph package exports.

This package stores "asset depends on asset" edges and answers structural
queries over them: closure, bounded trees, cycles, statistics, validation,
normalization, export and set operations.
"""

from engine.dependency.export import export_to_format, generate_markdown_report
from engine.dependency.models import DependencyAnalysis, DependencyStatistics, DependencyTree
from engine.dependency.ops import filter_by_name, merge
from engine.dependency.optimize import optimize
from engine.dependency.statistics import (
    analyze_asset_dependencies,
    find_orphaned_assets,
    generate_statistics,
    get_most_referenced_assets,
)
from engine.dependency.store import DependencyMap
from engine.dependency.traversal import (
    build_dependency_tree,
    calculate_max_depth,
    detect_circular_dependencies,
    get_all_dependencies,
)
from engine.dependency.validation import ValidationIssue, find_issues, validate

__all__ = [
    "DependencyMap",
    "DependencyTree",
    "DependencyStatistics",
    "DependencyAnalysis",
    "ValidationIssue",
    "get_all_dependencies",
    "build_dependency_tree",
    "detect_circular_dependencies",
    "calculate_max_depth",
    "find_orphaned_assets",
    "get_most_referenced_assets",
    "generate_statistics",
    "analyze_asset_dependencies",
    "find_issues",
    "validate",
    "optimize",
    "export_to_format",
    "generate_markdown_report",
    "merge",
    "filter_by_name",
]
