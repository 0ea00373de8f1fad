"""Registry of fraction metadata derived from the units of a build."""

import logging
from pathlib import Path
from typing import Any

import yaml

from fraction_bom.build_unit import BuildUnit, DeclaredDependency
from fraction_bom.coordinate_key import CoordinateKey
from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.errors import DependencyFormatError, ManifestError
from fraction_bom.find_detector_files import find_detector_files
from fraction_bom.find_fraction_entry_point import find_fraction_entry_point
from fraction_bom.fraction_metadata import FractionMetadata
from fraction_bom.fraction_metadata_builder import FractionMetadataBuilder
from fraction_bom.has_source_code import has_source_code
from fraction_bom.load_config import load_config
from fraction_bom.load_fraction_manifest import load_fraction_manifest
from fraction_bom.stability_level import StabilityLevel
from fraction_bom.walk_result import WalkResult

logger = logging.getLogger(__name__)


class FractionRegistry:
    """Caches FractionMetadata per coordinate and pools their dependencies.

    One registry is meant to live for a single build pass. Each unit is
    derived at most once; later calls are cache hits. The registry is not
    thread-safe: concurrent callers must serialize calls to resolve().
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize an empty registry using the given (or default) conventions."""
        self.config = config if config is not None else load_config()
        self._fractions: dict[CoordinateKey, FractionMetadata] = {}
        self._dependencies: dict[CoordinateKey, DependencyMetadata] = {}
        self._bom_inclusions: list[DependencyMetadata] = []
        # Units already derived that turned out not to be fractions.
        self._non_fractions: set[CoordinateKey] = set()

        self.props = self.config["properties"]
        self.conventions = self.config["conventions"]
        self.paths = self.config["paths"]
        self.reserved = self.config["reserved"]

    def resolve(self, unit: BuildUnit | None) -> FractionMetadata | None:
        """Return the fraction metadata for a unit, deriving it on first use."""
        if unit is None:
            return None
        if self._is_reserved(unit, "bootstrap"):
            logger.info("Skipping bootstrap unit %s", unit.artifact_id)
            return None

        key = CoordinateKey.of_unit(unit)
        if key in self._fractions:
            logger.debug("Cache hit for %s", key)
            return self._fractions[key]
        if key in self._non_fractions:
            return None

        logger.debug("Deriving fraction metadata for %s", key)
        meta = self._build(unit)
        if meta is None:
            self._non_fractions.add(key)
            return None

        self._fractions[key] = meta
        logger.debug("Derived %s with %d dependencies", key, len(meta.dependencies))
        return meta

    def lookup(self, dependency: Any) -> FractionMetadata | None:
        """Return cached metadata for a dependency; never derives anything."""
        return self._fractions.get(CoordinateKey.of_dependency(dependency))

    def bom_inclusions(self) -> list[DependencyMetadata]:
        """Non-fraction units that asked to be listed in the BOM, in order seen."""
        return list(self._bom_inclusions)

    def pooled_dependencies(self) -> list[DependencyMetadata]:
        """Every compile dependency seen so far, in order first seen."""
        return list(self._dependencies.values())

    def fractions(self) -> list[FractionMetadata]:
        return list(self._fractions.values())

    def _build(self, unit: BuildUnit) -> FractionMetadata | None:
        builder = FractionMetadataBuilder(
            unit.group_id,
            unit.artifact_id,
            unit.version,
            unit.packaging,
            unit.get_property(self.props["scope"]),
        )
        builder.name = unit.name
        builder.description = unit.description
        self._read_classification(unit, builder)
        self._read_basedir(unit, builder)

        if not self._is_reserved(unit, "spi"):
            found = find_fraction_entry_point(
                unit.source_directory, self.conventions["fraction_suffix"]
            )
            builder.fraction_entry_point = self._unwrap(found, unit, "entry point")

        if not builder.is_fraction():
            if unit.get_property(self.props["bom"]) is not None:
                dep = builder.to_dependency()
                self._bom_inclusions.append(dep)
                logger.info("Including non-fraction %s in BOM", dep)
            return None

        detector_package = self.conventions["detector_package"]
        builder.has_source_code = self._unwrap(
            has_source_code(
                unit.source_directory,
                self.conventions["source_suffix"],
                detector_package,
            ),
            unit,
            "source code",
        )
        builder.base_module_path = base_module_path(builder)
        for relative, absolute in self._unwrap(
            find_detector_files(unit.source_directory, detector_package),
            unit,
            "detector files",
        ):
            builder.add_detector_file(relative, absolute)

        for declared in unit.compile_dependencies():
            builder.add_dependency(self._pooled(declared))

        return builder.build()

    def _read_classification(
        self, unit: BuildUnit, builder: FractionMetadataBuilder
    ) -> None:
        stability = unit.get_property(self.props["stability"])
        if stability is not None:
            builder.stability = StabilityLevel.of(stability)

        tags = unit.get_property(self.props["tags"])
        if tags is not None:
            builder.tags = tags.split(",")

        if unit.get_property(self.props["internal"]) == "true":
            builder.internal = True

        bootstrap = unit.get_property(self.props["bootstrap"])
        if bootstrap is not None:
            builder.bootstrap = bootstrap

    def _read_basedir(self, unit: BuildUnit, builder: FractionMetadataBuilder) -> None:
        if unit.basedir is None:
            return
        manifest = unit.basedir.joinpath(*self.paths["fraction_manifest"])
        try:
            if not unit.basedir.exists():
                return
            module_conf = unit.basedir / self.paths["module_conf"]
            if module_conf.exists():
                builder.module_conf = module_conf
            if not manifest.exists():
                return
            # UnicodeDecodeError is a ValueError.
            transitive = load_fraction_manifest(manifest)
        except (OSError, ValueError, yaml.YAMLError, ManifestError):
            logger.exception(
                "Ignoring unreadable fraction manifest or config under %s", unit.basedir
            )
            return
        for dep in transitive:
            builder.add_transitive_dependency(dep)

    def _pooled(self, declared: DeclaredDependency) -> DependencyMetadata:
        if not declared.group_id or not declared.artifact_id:
            raise DependencyFormatError(
                f"{declared.group_id}:{declared.artifact_id}:{declared.version}",
                "declared dependency is missing its group or artifact",
            )
        key = CoordinateKey.of_declared(declared)
        dep = self._dependencies.get(key)
        if dep is None:
            dep = DependencyMetadata.of(
                declared.group_id,
                declared.artifact_id,
                declared.version,
                declared.classifier,
                declared.type,
            )
            self._dependencies[key] = dep
        return dep

    def _is_reserved(self, unit: BuildUnit, name: str) -> bool:
        reserved = self.reserved[name]
        return (
            unit.group_id == reserved["group"]
            and unit.artifact_id == reserved["artifact"]
        )

    @staticmethod
    def _unwrap(result: WalkResult, unit: BuildUnit, what: str) -> Any:
        for error in result.errors:
            logger.warning(
                "Error scanning %s of %s: %s", what, unit.artifact_id, error
            )
        return result.value


def base_module_path(builder: FractionMetadataBuilder) -> Path:
    """Parent of the entry point, or a path derived from group and artifact."""
    entry_point = builder.fraction_entry_point
    if entry_point is not None and entry_point.parent != Path():
        return entry_point.parent
    return Path(*builder.group_id.split("."), *builder.artifact_id.split("-"))
