"""Parser for Rust Cargo.toml files.

Only the ``[dependencies]`` table is scanned, line by line. Inline tables
are read by taking the first quoted string, so ``{ version = "1" }`` works
while ``{ git = "...", version = "1" }`` yields the git URL.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from sbomgen.analyzer.registry import FileNameMatcher, register_parser
from sbomgen.models import Component

log = structlog.get_logger("sbomgen.analyzer")

_SECTION = "[dependencies]"


def _inline_table_version(value: str) -> str | None:
    """Text between the first and second double quote, or None if unterminated."""
    start = value.find('"')
    if start < 0:
        return None
    end = value.find('"', start + 1)
    if end < 0:
        return None
    return value[start + 1 : end]


class CargoTomlParser(FileNameMatcher):
    ecosystem = "cargo"
    file_names = ("Cargo.toml",)

    def parse(self, file_path: Path, content: str) -> list[Component]:
        deps: list[Component] = []
        in_dependencies = False

        for raw_line in content.split("\n"):
            line = raw_line.strip()

            if line.startswith(_SECTION):
                in_dependencies = True
                continue
            if line.startswith("["):
                in_dependencies = False
                continue
            if not in_dependencies or not line or line.startswith("#"):
                continue

            name, sep, value = line.partition("=")
            if not sep:
                continue
            name = name.strip()
            value = value.strip()

            if value.startswith("{"):
                version = _inline_table_version(value)
                if version is None:
                    log.debug("cargo.line_skipped", file=str(file_path), line=line)
                    continue
            else:
                version = value.strip('"')

            deps.append(Component.create(name, version, self.ecosystem))

        return deps


register_parser(CargoTomlParser())
