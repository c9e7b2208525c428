"""Parser for npm package.json files."""

from __future__ import annotations

import json
from pathlib import Path

from sbomgen.analyzer.registry import FileNameMatcher, register_parser
from sbomgen.exceptions import ManifestParseError
from sbomgen.models import Component

_SECTIONS = (("dependencies", False), ("devDependencies", True))


def _string_map(data: dict, key: str, file_path: Path) -> dict[str, str]:
    """Return ``data[key]`` as a name -> version map, or raise if it is not one."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict) or not all(
        isinstance(v, str) for v in section.values()
    ):
        raise ManifestParseError(str(file_path), f"{key!r} is not a map of strings")
    return section


class NpmPackageJsonParser(FileNameMatcher):
    ecosystem = "npm"
    file_names = ("package.json",)

    def parse(self, file_path: Path, content: str) -> list[Component]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ManifestParseError(str(file_path), str(e)) from e

        if data is None:
            return []
        if not isinstance(data, dict):
            raise ManifestParseError(str(file_path), "top-level value is not an object")

        deps: list[Component] = []
        for key, dev in _SECTIONS:
            for name, version in _string_map(data, key, file_path).items():
                deps.append(Component.create(name, version, self.ecosystem, dev=dev))
        return deps


register_parser(NpmPackageJsonParser())
