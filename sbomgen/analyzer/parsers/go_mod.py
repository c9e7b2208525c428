"""Parser for Go go.mod files.

Any non-empty line with two whitespace-separated fields is read as
``<module> <version>``. This also picks up ``module`` and ``go`` directive
lines (and the ``require`` keyword itself on single-line requires), which
is a known over-approximation kept for compatibility with existing reports.
"""

from __future__ import annotations

from pathlib import Path

from sbomgen.analyzer.registry import FileNameMatcher, register_parser
from sbomgen.models import Component


def _is_candidate(line: str) -> bool:
    if line.startswith("require "):
        return True
    return bool(line) and any(ch.isspace() for ch in line)


class GoModParser(FileNameMatcher):
    ecosystem = "go"
    file_names = ("go.mod",)

    def parse(self, file_path: Path, content: str) -> list[Component]:
        deps: list[Component] = []

        for raw_line in content.split("\n"):
            line = raw_line.strip()
            if not _is_candidate(line):
                continue

            fields = line.split()
            if len(fields) < 2:
                continue

            # Module paths are reduced to their final path segment.
            name = fields[0].rsplit("/", 1)[-1]
            deps.append(Component.create(name, fields[1], self.ecosystem))

        return deps


register_parser(GoModParser())
