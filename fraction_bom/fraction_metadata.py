"""Frozen metadata describing one fraction."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fraction_bom.coordinate_key import CoordinateKey
from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.scope import Scope
from fraction_bom.stability_level import StabilityLevel


@dataclass(frozen=True)
class FractionMetadata:
    """Everything the registry derived about a fraction.

    Instances come out of FractionMetadataBuilder.build() and are never
    mutated afterwards; collections are tuples.
    """

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    scope: Scope = Scope.COMPILE
    name: str | None = None
    description: str | None = None
    stability: StabilityLevel = StabilityLevel.UNSTABLE
    internal: bool = False
    tags: tuple[str, ...] = ()
    bootstrap: str | None = None
    module_conf: Path | None = None
    fraction_entry_point: Path | None = None  # relative to the source directory
    base_module_path: Path | None = None
    has_source_code: bool = False
    detector_files: tuple[tuple[Path, Path], ...] = ()
    dependencies: tuple[DependencyMetadata, ...] = ()
    transitive_dependencies: tuple[DependencyMetadata, ...] = ()

    @property
    def classifier(self) -> None:
        """Fractions are always unclassified artifacts."""
        return None

    def is_fraction(self) -> bool:
        return self.fraction_entry_point is not None

    def key(self) -> CoordinateKey:
        return CoordinateKey.of_dependency(self)

    def to_dependency(self) -> DependencyMetadata:
        """Wrap this unit's own coordinates as a dependency."""
        return DependencyMetadata(
            self.group_id,
            self.artifact_id,
            self.version,
            None,
            self.packaging,
            self.scope,
        )

    def has_default_scope(self) -> bool:
        return self.scope is Scope.COMPILE

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reporting; only identity is always present."""
        data: dict[str, Any] = {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
        }
        if not self.has_default_scope():
            data["scope"] = self.scope.value
        if self.name:
            data["name"] = self.name
        if self.description:
            data["description"] = self.description
        data["stabilityIndex"] = self.stability.value
        if self.internal:
            data["internal"] = True
        if self.tags:
            data["tags"] = list(self.tags)
        if self.bootstrap is not None:
            data["bootstrap"] = self.bootstrap
        if self.dependencies:
            data["dependencies"] = [d.to_dict() for d in self.dependencies]
        return data
