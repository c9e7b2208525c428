"""Parser for pip requirements.txt files."""

from __future__ import annotations

from pathlib import Path

import structlog

from sbomgen.analyzer.registry import FileNameMatcher, register_parser
from sbomgen.models import Component

log = structlog.get_logger("sbomgen.analyzer")

# Tried in order; a later operator is only used when no earlier one is present.
_PIN_OPERATORS = ("==", ">=", "<=")


def _split_pin(line: str) -> tuple[str, str] | None:
    for op in _PIN_OPERATORS:
        name, sep, version = line.partition(op)
        if sep:
            return name.strip(), version.strip()
    return None


class PipRequirementsParser(FileNameMatcher):
    ecosystem = "pypi"
    file_names = ("requirements.txt",)

    def parse(self, file_path: Path, content: str) -> list[Component]:
        deps: list[Component] = []

        for raw_line in content.split("\n"):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            pin = _split_pin(line)
            if pin is None:
                log.debug("pypi.line_skipped", file=str(file_path), line=line)
                continue

            name, version = pin
            deps.append(Component.create(name, version, self.ecosystem))

        return deps


register_parser(PipRequirementsParser())
