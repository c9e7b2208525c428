"""Dependency analyzer — detect project components from ecosystem manifests."""

from sbomgen.analyzer.registry import PARSER_REGISTRY, ManifestParser
from sbomgen.analyzer.scanner import (
    PRUNED_DIRS,
    ProjectAnalyzer,
    analyze_dir,
    detect_project_type,
)

__all__ = [
    "PARSER_REGISTRY",
    "PRUNED_DIRS",
    "ManifestParser",
    "ProjectAnalyzer",
    "analyze_dir",
    "detect_project_type",
]
