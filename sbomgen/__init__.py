"""sbomgen: Software Bill of Materials generator for multi-ecosystem projects."""

__version__ = "1.0.0"

from sbomgen.analyzer import ProjectAnalyzer, analyze_dir, detect_project_type
from sbomgen.exceptions import (
    FormatError,
    ManifestParseError,
    SbomgenError,
    UnknownFormatError,
    WalkError,
)
from sbomgen.models import SBOM, Component, Metadata

__all__ = [
    "SBOM",
    "Component",
    "FormatError",
    "ManifestParseError",
    "Metadata",
    "ProjectAnalyzer",
    "SbomgenError",
    "UnknownFormatError",
    "WalkError",
    "analyze_dir",
    "detect_project_type",
]
