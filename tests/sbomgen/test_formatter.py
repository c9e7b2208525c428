"""Tests for the output formatters."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
import yaml

from sbomgen.exceptions import UnknownFormatError
from sbomgen.formatter import (
    FORMAT_NAMES,
    CycloneDXFormatter,
    MarkdownFormatter,
    SPDXFormatter,
    TableFormatter,
    get_formatter,
    render_table,
    truncate,
)
from sbomgen.models import SBOM, Component


@pytest.fixture
def sbom():
    doc = SBOM(
        "sbomgen",
        "1.0.0",
        "sbom-001",
        created=datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
    )
    doc.add_component(Component.create("express", "^4.18.0", "npm"))
    doc.add_component(Component.create("jest", "29.0.0", "npm", dev=True))
    doc.add_component(Component(name="bare", version=""))
    return doc


class TestGetFormatter:
    def test_all_names(self):
        assert set(FORMAT_NAMES) == {"json", "yaml", "markdown", "table", "spdx", "cyclonedx"}
        for name in FORMAT_NAMES:
            assert get_formatter(name).name == name

    def test_case_insensitive(self):
        assert get_formatter("JSON").name == "json"

    def test_unknown(self):
        with pytest.raises(UnknownFormatError):
            get_formatter("xml")


class TestFormatters:
    def test_json(self, sbom):
        out = json.loads(get_formatter("json").format(sbom))
        assert out["name"] == "sbomgen"
        assert [c["name"] for c in out["components"]] == ["express", "jest", "bare"]
        assert out["components"][0]["purl"] == "pkg:npm/express@^4.18.0"
        assert out["components"][1]["metadata"]["description"] == "development dependency"

    def test_yaml(self, sbom):
        out = yaml.safe_load(get_formatter("yaml").format(sbom))
        assert out["serialNumber"] == "sbom-001"
        assert out["components"][0]["version"] == "^4.18.0"

    def test_markdown(self, sbom):
        out = MarkdownFormatter().format(sbom)
        assert out.startswith("# Software Bill of Materials\n")
        assert "**Project:** sbomgen v1.0.0" in out
        assert "**Created:** 2024-05-06 07:08:09 UTC" in out
        assert "**Total Components:** 3" in out
        assert "| 1 | express | ^4.18.0 | npm |  |" in out
        assert "No relationships defined." in out

    def test_markdown_relationships(self, sbom):
        sbom.add_relationship("a", "b", "DEPENDS_ON")
        out = MarkdownFormatter().format(sbom)
        assert "| a | b | DEPENDS_ON |" in out

    def test_table(self, sbom):
        lines = TableFormatter().format(sbom).splitlines()
        assert lines[0].split() == ["NAME", "VERSION", "SUPPLIER", "PURL"]
        assert lines[1] == "-" * 80
        assert lines[2].startswith("express")
        assert len(lines) == 5

    def test_table_truncates(self):
        comp = Component.create("x" * 40, "1.0.0", "npm")
        line = render_table([comp]).splitlines()[2]
        assert line.startswith("x" * 27 + "...")

    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("abcdefghij", 8) == "abcde..."

    def test_spdx(self, sbom):
        out = SPDXFormatter().format(sbom)
        assert out.startswith("SPDXVersion: SPDX-2.2\n")
        assert "DocumentNamespace: https://sbom.example.org/sbomgen/1.0.0" in out
        assert "Created: 2024-05-06T07:08:09Z" in out
        assert "SPDXID: SPDXRef-Package-0" in out
        assert "PackageDownloadLocation: pkg:npm/express@^4.18.0" in out
        assert "PackageSupplier: Organization: npm" in out
        assert out.count("FilesAnalyzed: false") == 3

    def test_spdx_empty_purl_omitted(self):
        doc = SBOM("app", "1", "s")
        doc.add_component(Component(name="bare", version="1"))
        assert "PackageDownloadLocation" not in SPDXFormatter().format(doc)

    def test_cyclonedx(self, sbom):
        out = json.loads(CycloneDXFormatter().format(sbom))
        assert out["bomFormat"] == "CycloneDX"
        assert out["specVersion"] == "1.5"
        assert out["serialNumber"].startswith("urn:uuid:")
        assert out["metadata"]["component"]["name"] == "sbomgen"
        comps = out["components"]
        assert [c["name"] for c in comps] == ["express", "jest", "bare"]
        assert comps[0]["purl"] == "pkg:npm/express@^4.18.0"
        assert comps[1]["scope"] == "optional"
        assert "purl" not in comps[2]
        assert len({c["bom-ref"] for c in comps}) == 3
