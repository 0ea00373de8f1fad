"""Identity keys for build artifacts."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fraction_bom.build_unit import BuildUnit, DeclaredDependency

ABSENT = "<absent>"


@dataclass(frozen=True)
class CoordinateKey:
    """The (group, artifact, version, classifier, packaging) identity of an artifact.

    Used only as a dictionary key. Keys built from different records are equal
    and hash alike whenever all five fields match.
    """

    group_id: str
    artifact_id: str
    version: str
    classifier: str | None
    packaging: str

    def composite_key(self) -> str:
        """Render the key as group:artifact:version:classifier:packaging."""
        classifier = ABSENT if self.classifier is None else self.classifier
        return ":".join(
            [self.group_id, self.artifact_id, self.version, classifier, self.packaging]
        )

    def __str__(self) -> str:
        return self.composite_key()

    @classmethod
    def of_unit(cls, unit: "BuildUnit") -> "CoordinateKey":
        """Key for a build unit; units never carry a classifier."""
        return cls(unit.group_id, unit.artifact_id, unit.version, None, unit.packaging)

    @classmethod
    def of_declared(cls, dependency: "DeclaredDependency") -> "CoordinateKey":
        """Key for a dependency as declared by a build unit."""
        return cls(
            dependency.group_id,
            dependency.artifact_id,
            dependency.version,
            dependency.classifier,
            dependency.type,
        )

    @classmethod
    def of_dependency(cls, meta: Any) -> "CoordinateKey":
        """Key for a DependencyMetadata or FractionMetadata."""
        return cls(
            meta.group_id,
            meta.artifact_id,
            meta.version,
            meta.classifier,
            meta.packaging,
        )
