"""Output formatters — serialize an SBOM document into report formats."""

from __future__ import annotations

import json
import uuid
from abc import ABC, abstractmethod
from typing import Any

import structlog
import yaml

from sbomgen.exceptions import FormatError, UnknownFormatError
from sbomgen.models import SBOM, Component

log = structlog.get_logger("sbomgen.formatter")

TOOL_NAME = "sbomgen"
CYCLONEDX_SPEC_VERSION = "1.5"
SPDX_VERSION = "SPDX-2.2"


def truncate(s: str, max_len: int) -> str:
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def render_table(components: list[Component]) -> str:
    """Fixed-width NAME/VERSION/SUPPLIER/PURL listing."""
    lines = [f"{'NAME':<30} {'VERSION':<20} {'SUPPLIER':<15} {'PURL':<12}", "-" * 80]
    for comp in components:
        lines.append(
            f"{truncate(comp.name, 30):<30} "
            f"{truncate(comp.version, 20):<20} "
            f"{truncate(comp.supplier, 15):<15} "
            f"{truncate(comp.purl, 12):<12}"
        )
    return "\n".join(lines) + "\n"


class Formatter(ABC):
    """Base class for SBOM serializers."""

    name: str

    @abstractmethod
    def format(self, sbom: SBOM) -> str: ...


class JSONFormatter(Formatter):
    name = "json"

    def format(self, sbom: SBOM) -> str:
        try:
            return json.dumps(sbom.to_dict(), indent=2)
        except (TypeError, ValueError) as e:
            raise FormatError(f"failed to serialize to JSON: {e}") from e


class YAMLFormatter(Formatter):
    name = "yaml"

    def format(self, sbom: SBOM) -> str:
        try:
            return yaml.safe_dump(sbom.to_dict(), sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise FormatError(f"failed to serialize to YAML: {e}") from e


class MarkdownFormatter(Formatter):
    name = "markdown"

    def format(self, sbom: SBOM) -> str:
        lines = [
            "# Software Bill of Materials",
            "",
            f"**Project:** {sbom.name} v{sbom.version}",
            "",
            f"**Created:** {sbom.created.strftime('%Y-%m-%d %H:%M:%S')} UTC",
            f"**Total Components:** {sbom.count()}",
            "",
            "## Components",
            "",
            "| # | Name | Version | Supplier | License |",
            "|---|------|---------|----------|---------|",
        ]
        for i, comp in enumerate(sbom.components, start=1):
            lines.append(
                f"| {i} | {comp.name} | {comp.version} | {comp.supplier} | {comp.license} |"
            )

        lines += ["", "## Relationships", ""]
        if not sbom.relationships:
            lines.append("No relationships defined.")
        else:
            lines.append("| Component A | Component B | Relationship |")
            lines.append("|-------------|-------------|--------------|")
            for rel in sbom.relationships:
                lines.append(f"| {rel.ref_a} | {rel.ref_b} | {rel.relationship} |")

        return "\n".join(lines) + "\n"


class TableFormatter(Formatter):
    name = "table"

    def format(self, sbom: SBOM) -> str:
        return render_table(sbom.components)


class SPDXFormatter(Formatter):
    """SPDX 2.2 tag-value document, one package block per component."""

    name = "spdx"

    def format(self, sbom: SBOM) -> str:
        lines = [
            f"SPDXVersion: {SPDX_VERSION}",
            "DataLicense: CC0-1.0",
            "SPDXID: SPDXRef-DOCUMENT",
            f"DocumentName: {sbom.name}",
            f"DocumentNamespace: https://sbom.example.org/{sbom.name}/{sbom.version}",
            f"Creator: Tool: {TOOL_NAME}-{sbom.version}",
            f"Created: {sbom.created.strftime('%Y-%m-%dT%H:%M:%SZ')}",
            "",
            "## Packages",
            "",
        ]
        for i, comp in enumerate(sbom.components):
            lines.append(f"PackageName: {comp.name}")
            lines.append(f"SPDXID: SPDXRef-Package-{i}")
            lines.append(f"PackageVersion: {comp.version}")
            lines.append(f"PackageSupplier: Organization: {comp.supplier or 'NOASSERTION'}")
            if comp.license:
                lines.append(f"PackageLicenseConcluded: {comp.license}")
            if comp.purl:
                lines.append(f"PackageDownloadLocation: {comp.purl}")
            lines.append("FilesAnalyzed: false")
            lines.append("")
        return "\n".join(lines)


class CycloneDXFormatter(Formatter):
    """CycloneDX JSON BOM."""

    name = "cyclonedx"

    def format(self, sbom: SBOM) -> str:
        bom: dict[str, Any] = {
            "bomFormat": "CycloneDX",
            "specVersion": CYCLONEDX_SPEC_VERSION,
            "serialNumber": f"urn:uuid:{uuid.uuid4()}",
            "version": 1,
            "metadata": {
                "timestamp": sbom.created.strftime("%Y-%m-%dT%H:%M:%SZ"),
                "tools": [{"name": TOOL_NAME, "version": sbom.version}],
                "component": {
                    "type": "application",
                    "name": sbom.name,
                    "version": sbom.version,
                },
            },
            "components": [self._component(i, c) for i, c in enumerate(sbom.components)],
        }
        try:
            return json.dumps(bom, indent=2)
        except (TypeError, ValueError) as e:
            raise FormatError(f"failed to serialize to CycloneDX: {e}") from e

    @staticmethod
    def _component(index: int, comp: Component) -> dict[str, Any]:
        # purls are not unique across records, so the index keeps bom-refs distinct
        out: dict[str, Any] = {
            "type": "library",
            "bom-ref": f"{comp.purl or comp.name}#{index}",
            "name": comp.name,
            "version": comp.version,
        }
        if comp.supplier:
            out["supplier"] = {"name": comp.supplier}
        if comp.purl:
            out["purl"] = comp.purl
        if comp.license:
            out["licenses"] = [{"license": {"id": comp.license}}]
        if comp.is_dev_dependency:
            out["scope"] = "optional"
        return out


_FORMATTERS: dict[str, type[Formatter]] = {
    cls.name: cls
    for cls in (
        JSONFormatter,
        YAMLFormatter,
        MarkdownFormatter,
        TableFormatter,
        SPDXFormatter,
        CycloneDXFormatter,
    )
}

FORMAT_NAMES = tuple(_FORMATTERS)


def get_formatter(name: str) -> Formatter:
    """Return a formatter instance by format name."""
    try:
        cls = _FORMATTERS[name.lower()]
    except KeyError:
        raise UnknownFormatError(
            f"unknown format {name!r} (expected one of: {', '.join(FORMAT_NAMES)})"
        ) from None
    log.debug("formatter.selected", format=cls.name)
    return cls()
