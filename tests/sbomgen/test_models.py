"""Tests for component records and the SBOM document."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from sbomgen.models import SBOM, Annotation, Component, Hash, Metadata, package_url


def _comp(name: str, version: str = "1.0.0", supplier: str = "npm", **kw) -> Component:
    return Component(name=name, version=version, supplier=supplier, **kw)


class TestComponent:
    def test_create_sets_purl(self):
        comp = Component.create("express", "^4.18.0", "npm")
        assert comp.purl == "pkg:npm/express@^4.18.0"
        assert comp.supplier == "npm"
        assert comp.ecosystem == "npm"
        assert comp.package_url == comp.purl
        assert not comp.is_dev_dependency

    def test_create_dev(self):
        comp = Component.create("jest", "29", "npm", dev=True)
        assert comp.is_dev_dependency
        assert comp.metadata.description == "development dependency"

    def test_package_url(self):
        assert package_url("cargo", "serde", "1.0") == "pkg:cargo/serde@1.0"

    def test_hand_built_record_has_no_purl(self):
        comp = _comp("x")
        assert comp.purl == ""
        assert comp.package_url == ""

    def test_immutable(self):
        comp = Component.create("a", "1", "pypi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            comp.version = "2"  # type: ignore[misc]

    def test_to_dict_omits_empty_fields(self):
        assert Component.create("a", "1", "pypi").to_dict() == {
            "name": "a",
            "version": "1",
            "supplier": "pypi",
            "purl": "pkg:pypi/a@1",
        }

    def test_to_dict_full(self):
        comp = _comp(
            "a",
            license="MIT",
            metadata=Metadata(author="me"),
            dependencies=("b",),
            hashes=(Hash("SHA-256", "abc"),),
        )
        out = comp.to_dict()
        assert out["license"] == "MIT"
        assert out["metadata"] == {"author": "me"}
        assert out["dependencies"] == ["b"]
        assert out["hashes"] == [{"algorithm": "SHA-256", "value": "abc"}]

    def test_empty_fields_tolerated(self):
        assert Component(name="", version="").to_dict() == {"name": "", "version": ""}


class TestSBOM:
    def test_new(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        assert sbom.name == "test-app"
        assert sbom.version == "1.0.0"
        assert sbom.serial_number == "serial-001"
        assert sbom.spec_version == "0.24.0"
        assert sbom.count() == 0
        assert sbom.created.tzinfo is not None

    def test_add_component(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        sbom.add_component(_comp("test-lib", "2.0.0", license="MIT"))
        assert sbom.count() == 1
        assert sbom.components[0].name == "test-lib"

    def test_get_component_by_purl(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        sbom.add_component(Component.create("lib-a", "1.0.0", "npm"))
        sbom.add_component(Component.create("lib-b", "2.0.0", "pypi"))

        found = sbom.get_component_by_purl("pkg:npm/lib-a@1.0.0")
        assert found is not None
        assert found.name == "lib-a"
        assert sbom.get_component_by_purl("pkg:npm/nonexistent@1.0.0") is None

    def test_get_components_by_license(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        sbom.add_component(_comp("a", license="MIT"))
        sbom.add_component(_comp("b", license="Apache-2.0"))
        sbom.add_component(_comp("c", license="MIT"))
        assert [c.name for c in sbom.get_components_by_license("MIT")] == ["a", "c"]
        assert sbom.get_components_by_license("GPL-3.0") == []

    def test_add_relationship(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        sbom.add_relationship("pkg:npm/a@1", "pkg:npm/b@2", "DEPENDS_ON")
        rel = sbom.relationships[0]
        assert (rel.ref_a, rel.ref_b, rel.relationship) == (
            "pkg:npm/a@1",
            "pkg:npm/b@2",
            "DEPENDS_ON",
        )

    def test_has_vulnerable_license(self):
        sbom = SBOM("test-app", "1.0.0", "serial-001")
        sbom.add_component(_comp("a", license="MIT"))
        assert not sbom.has_vulnerable_license(["GPL-3.0", "AGPL-3.0"])
        sbom.add_component(_comp("b", license="AGPL-3.0"))
        assert sbom.has_vulnerable_license(["GPL-3.0", "AGPL-3.0"])

    def test_to_dict(self):
        created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        sbom = SBOM("app", "1.0.0", "sbom-001", created=created)
        sbom.add_component(Component.create("a", "1", "go"))
        sbom.annotations.append(Annotation("pkg:go/a@1", "REVIEW", created, "ok"))
        out = sbom.to_dict()
        assert out["specVersion"] == "0.24.0"
        assert out["serialNumber"] == "sbom-001"
        assert out["created"] == "2024-01-02T03:04:05Z"
        assert out["components"][0]["purl"] == "pkg:go/a@1"
        assert "relationships" not in out
        assert out["annotations"][0]["componentRef"] == "pkg:go/a@1"
