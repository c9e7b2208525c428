"""Project analyzer — walk a directory tree and collect components from manifests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

# Ensure parsers are registered before any scan runs.
import sbomgen.analyzer.parsers  # noqa: F401
from sbomgen.analyzer.registry import PARSER_REGISTRY, ManifestParser
from sbomgen.exceptions import ManifestParseError, WalkError
from sbomgen.models import Component

log = structlog.get_logger("sbomgen.analyzer")

PRUNED_DIRS = frozenset({"node_modules", "vendor", ".git", "dist", "build"})

UNKNOWN = "unknown"

# Checked per directory entry; the first entry in listing order wins.
_PROJECT_SIGNATURES: dict[str, str] = {
    "package.json": "npm",
    "requirements.txt": "pypi",
    "setup.py": "pypi",
    "pyproject.toml": "pypi",
    "go.mod": "go",
    "Cargo.toml": "cargo",
    "pom.xml": "maven",
}


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir() and not path.is_symlink()
    except OSError:
        return False


def _list_dir(path: Path) -> list[str]:
    return sorted(os.listdir(path))


def _walk(path: Path, entries: list[str] | None = None) -> Iterator[Path]:
    """Yield files under *path* depth-first, entries in lexical order.

    Pruned directories are skipped before any of their contents are listed.
    Unreadable directories are logged and skipped. *entries* is the
    already-listed content of *path*, when the caller has it.
    """
    if path.name in PRUNED_DIRS:
        log.debug("analyzer.dir_pruned", path=str(path))
        return
    if entries is None:
        try:
            entries = _list_dir(path)
        except OSError as e:
            log.warning("analyzer.dir_unreadable", path=str(path), error=str(e))
            return

    for entry in entries:
        child = path / entry
        if _is_dir(child):
            yield from _walk(child)
        else:
            yield child


class ProjectAnalyzer:
    """Run a fixed, ordered set of manifest parsers over a directory tree."""

    def __init__(self, parsers: list[ManifestParser] | None = None) -> None:
        self._parsers = list(PARSER_REGISTRY.values()) if parsers is None else parsers

    @property
    def parsers(self) -> list[ManifestParser]:
        return list(self._parsers)

    def analyze_dir(self, root: str | os.PathLike[str]) -> list[Component]:
        """Collect components from every recognized manifest under *root*.

        Raises :class:`WalkError` only when *root* itself cannot be read
        (missing, or a directory that cannot be listed). Unreadable
        directories below the root and files whose parser fails are
        dropped from the result.
        """
        root_path = Path(root)
        entries: list[str] | None = None
        try:
            root_path.stat()
            is_dir = root_path.is_dir()
            if is_dir and root_path.name not in PRUNED_DIRS:
                entries = _list_dir(root_path)
        except OSError as e:
            raise WalkError(str(root_path), e.strerror or str(e)) from e

        files = _walk(root_path, entries) if is_dir else iter([root_path])

        components: list[Component] = []
        manifests = 0
        failed = 0
        for file_path in files:
            for parser in self._parsers:
                if not parser.matches(file_path):
                    continue
                manifests += 1
                found = self._run_parser(parser, file_path)
                if found is None:
                    failed += 1
                    continue
                components.extend(found)

        log.info(
            "analyzer.done",
            root=str(root_path),
            manifests=manifests,
            failed=failed,
            components=len(components),
        )
        return components

    @staticmethod
    def _run_parser(parser: ManifestParser, file_path: Path) -> list[Component] | None:
        """Parse one manifest; returns None if the file could not be used."""
        try:
            content = file_path.read_text(encoding="utf-8")
            return parser.parse(file_path, content)
        except (ManifestParseError, OSError, UnicodeDecodeError) as e:
            log.warning(
                "analyzer.parse_failed",
                file=str(file_path),
                ecosystem=parser.ecosystem,
                error=str(e),
            )
            return None


def analyze_dir(root: str | os.PathLike[str]) -> list[Component]:
    """Scan *root* with all registered parsers (see :class:`ProjectAnalyzer`)."""
    return ProjectAnalyzer().analyze_dir(root)


def detect_project_type(directory: str | os.PathLike[str]) -> str:
    """Return the ecosystem tag of the first signature file in *directory*.

    Only the directory itself is listed. Returns ``"unknown"`` when nothing
    matches or the directory cannot be read.
    """
    try:
        entries = sorted(os.listdir(directory))
    except OSError:
        return UNKNOWN

    for entry in entries:
        tag = _PROJECT_SIGNATURES.get(entry)
        if tag is not None:
            return tag
    return UNKNOWN
