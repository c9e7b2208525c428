"""Data models — component records and the SBOM document that aggregates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

DEV_DEPENDENCY = "development dependency"

SPEC_VERSION = "0.24.0"


def package_url(ecosystem: str, name: str, version: str) -> str:
    """Compose the canonical ``pkg:<ecosystem>/<name>@<version>`` identifier."""
    return f"pkg:{ecosystem}/{name}@{version}"


def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class Hash:
    """A cryptographic hash of a component."""

    algorithm: str
    value: str


@dataclass(frozen=True)
class Metadata:
    """Free-form annotations attached to a component."""

    author: str = ""
    publisher: str = ""
    description: str = ""
    homepage_url: str = ""
    source_url: str = ""
    last_modified: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key in ("author", "publisher", "description", "homepage_url", "source_url"):
            value = getattr(self, key)
            if value:
                out[key] = value
        if self.last_modified is not None:
            out["last_modified"] = _iso(self.last_modified)
        return out


@dataclass(frozen=True)
class Component:
    """A single dependency declaration discovered in a manifest file.

    ``supplier`` holds the ecosystem tag (npm, pypi, go, cargo, maven).
    ``purl`` is fixed when the record is built via :meth:`create` and is
    left empty on hand-constructed records unless given explicitly.
    """

    name: str
    version: str
    supplier: str = ""
    license: str = ""
    purl: str = ""
    cpe: str = ""
    metadata: Metadata = field(default_factory=Metadata)
    dependencies: tuple[str, ...] = ()
    hashes: tuple[Hash, ...] = ()

    @classmethod
    def create(
        cls, name: str, version: str, ecosystem: str, *, dev: bool = False
    ) -> Component:
        """Build a parser-emitted record with its package URL."""
        metadata = Metadata(description=DEV_DEPENDENCY) if dev else Metadata()
        return cls(
            name=name,
            version=version,
            supplier=ecosystem,
            purl=package_url(ecosystem, name, version),
            metadata=metadata,
        )

    @property
    def ecosystem(self) -> str:
        return self.supplier

    @property
    def package_url(self) -> str:
        return self.purl

    @property
    def is_dev_dependency(self) -> bool:
        return self.metadata.description == DEV_DEPENDENCY

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "version": self.version}
        for key in ("supplier", "license", "purl", "cpe"):
            value = getattr(self, key)
            if value:
                out[key] = value
        metadata = self.metadata.to_dict()
        if metadata:
            out["metadata"] = metadata
        if self.dependencies:
            out["dependencies"] = list(self.dependencies)
        if self.hashes:
            out["hashes"] = [{"algorithm": h.algorithm, "value": h.value} for h in self.hashes]
        return out


@dataclass
class Relationship:
    """A directed relationship between two component references."""

    ref_a: str
    ref_b: str
    relationship: str


@dataclass
class Annotation:
    """A timestamped note attached to a component reference."""

    component_ref: str
    event_type: str
    time: datetime
    summary: str


@dataclass
class SBOM:
    """The complete Software Bill of Materials for one project."""

    name: str
    version: str
    serial_number: str
    spec_version: str = SPEC_VERSION
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    author: str = ""
    provider: str = ""
    description: str = ""
    components: list[Component] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def add_relationship(self, ref_a: str, ref_b: str, relationship: str) -> None:
        self.relationships.append(Relationship(ref_a, ref_b, relationship))

    def get_component_by_purl(self, purl: str) -> Component | None:
        """Return the first component with *purl*, or None."""
        for comp in self.components:
            if comp.purl == purl:
                return comp
        return None

    def get_components_by_license(self, license: str) -> list[Component]:
        return [c for c in self.components if c.license == license]

    def count(self) -> int:
        return len(self.components)

    def has_vulnerable_license(self, licenses: list[str]) -> bool:
        """True if any component carries one of *licenses*."""
        flagged = set(licenses)
        return any(c.license in flagged for c in self.components)

    def to_dict(self) -> dict[str, Any]:
        """Serializable view; optional document fields are omitted when empty."""
        out: dict[str, Any] = {
            "specVersion": self.spec_version,
            "name": self.name,
            "version": self.version,
            "serialNumber": self.serial_number,
            "created": _iso(self.created),
        }
        for key in ("author", "provider", "description"):
            value = getattr(self, key)
            if value:
                out[key] = value
        out["components"] = [c.to_dict() for c in self.components]
        if self.relationships:
            out["relationships"] = [
                {"refA": r.ref_a, "refB": r.ref_b, "relationship": r.relationship}
                for r in self.relationships
            ]
        if self.annotations:
            out["annotations"] = [
                {
                    "componentRef": a.component_ref,
                    "eventType": a.event_type,
                    "time": _iso(a.time),
                    "summary": a.summary,
                }
                for a in self.annotations
            ]
        return out
