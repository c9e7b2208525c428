"""Parser registry — ordered set of manifest parsers consulted for every file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from sbomgen.models import Component


@runtime_checkable
class ManifestParser(Protocol):
    """Interface that every ecosystem parser must satisfy."""

    ecosystem: str
    file_names: tuple[str, ...]

    def matches(self, path: Path) -> bool: ...

    def parse(self, file_path: Path, content: str) -> list[Component]: ...


class FileNameMatcher:
    """Mixin: a parser applies to a path whose base name is one of ``file_names``."""

    file_names: tuple[str, ...] = ()

    def matches(self, path: Path) -> bool:
        return Path(path).name in self.file_names


# Insertion order is dispatch order.
PARSER_REGISTRY: dict[str, ManifestParser] = {}


def register_parser(parser: ManifestParser) -> None:
    """Register a parser instance by its ecosystem tag."""
    PARSER_REGISTRY[parser.ecosystem] = parser


def parsers_for(path: Path) -> list[ManifestParser]:
    """Return every registered parser that applies to *path*, in registration order."""
    return [p for p in PARSER_REGISTRY.values() if p.matches(path)]
