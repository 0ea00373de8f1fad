"""Mutable accumulator used while a fraction is being derived."""

from pathlib import Path

from fraction_bom.coordinate_key import CoordinateKey
from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.fraction_metadata import FractionMetadata
from fraction_bom.scope import Scope
from fraction_bom.stability_level import StabilityLevel


class FractionMetadataBuilder:
    """Collects fraction fields one at a time, then freezes them."""

    def __init__(
        self,
        group_id: str,
        artifact_id: str,
        version: str,
        packaging: str = "jar",
        scope: str | None = None,
    ) -> None:
        self.group_id = group_id
        self.artifact_id = artifact_id
        self.version = version
        self.packaging = packaging
        self.scope = Scope.of(scope)
        self.name: str | None = None
        self.description: str | None = None
        self.stability = StabilityLevel.UNSTABLE
        self.internal = False
        self.tags: list[str] = []
        self.bootstrap: str | None = None
        self.module_conf: Path | None = None
        self.fraction_entry_point: Path | None = None
        self.base_module_path: Path | None = None
        self.has_source_code = False
        self.detector_files: list[tuple[Path, Path]] = []
        # Keyed so a later add with an equal key replaces the earlier one.
        self._dependencies: dict[CoordinateKey, DependencyMetadata] = {}
        self._transitive: dict[CoordinateKey, DependencyMetadata] = {}

    @property
    def classifier(self) -> None:
        return None

    def is_fraction(self) -> bool:
        return self.fraction_entry_point is not None

    def add_dependency(self, dependency: DependencyMetadata) -> None:
        self._dependencies[dependency.key()] = dependency

    def add_transitive_dependency(self, dependency: DependencyMetadata) -> None:
        self._transitive[dependency.key()] = dependency

    def add_detector_file(self, relative: Path, absolute: Path) -> None:
        self.detector_files.append((relative, absolute))

    @property
    def dependencies(self) -> list[DependencyMetadata]:
        return list(self._dependencies.values())

    @property
    def transitive_dependencies(self) -> list[DependencyMetadata]:
        return list(self._transitive.values())

    def to_dependency(self) -> DependencyMetadata:
        """Wrap the unit's own coordinates, carrying its scope override."""
        return DependencyMetadata(
            self.group_id,
            self.artifact_id,
            self.version,
            None,
            self.packaging,
            self.scope,
        )

    def build(self) -> FractionMetadata:
        """Return the frozen FractionMetadata for everything collected so far."""
        return FractionMetadata(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
            packaging=self.packaging,
            scope=self.scope,
            name=self.name,
            description=self.description,
            stability=self.stability,
            internal=self.internal,
            tags=tuple(self.tags),
            bootstrap=self.bootstrap,
            module_conf=self.module_conf,
            fraction_entry_point=self.fraction_entry_point,
            base_module_path=self.base_module_path,
            has_source_code=self.has_source_code,
            detector_files=tuple(self.detector_files),
            dependencies=tuple(self._dependencies.values()),
            transitive_dependencies=tuple(self._transitive.values()),
        )
