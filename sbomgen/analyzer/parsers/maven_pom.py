"""Parser for Maven pom.xml files.

This is a line scanner, not an XML parser: ``<artifactId>`` and
``<version>`` are only paired when they sit on the same physical line
inside ``<dependencies>``. The usual one-tag-per-line layout therefore
yields no components.
"""

from __future__ import annotations

from pathlib import Path

from sbomgen.analyzer.registry import FileNameMatcher, register_parser
from sbomgen.models import Component


def extract_tag(line: str, tag: str) -> str:
    """Return the text between ``<tag>`` and ``</tag>`` on *line*, or ''."""
    start_tag = f"<{tag}>"
    end_tag = f"</{tag}>"

    start = line.find(start_tag)
    if start < 0:
        return ""
    start += len(start_tag)

    end = line.find(end_tag, start)
    if end < 0:
        return ""
    return line[start:end]


def parse_pom_xml(content: str) -> list[Component]:
    deps: list[Component] = []
    in_dependencies = False

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if "<dependencies>" in line:
            in_dependencies = True
            continue
        if "</dependencies>" in line:
            in_dependencies = False
            continue
        if not in_dependencies:
            continue

        if "<artifactId>" in line and "</artifactId>" in line:
            artifact_id = extract_tag(line, "artifactId")
            version = extract_tag(line, "version")
            if artifact_id and version:
                deps.append(Component.create(artifact_id, version, MavenPomParser.ecosystem))

    return deps


class MavenPomParser(FileNameMatcher):
    ecosystem = "maven"
    file_names = ("pom.xml",)

    def parse(self, file_path: Path, content: str) -> list[Component]:
        return parse_pom_xml(content)


register_parser(MavenPomParser())
