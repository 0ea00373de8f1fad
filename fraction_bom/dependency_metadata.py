"""Immutable description of one resolved dependency coordinate."""

from dataclasses import dataclass
from typing import Any

from fraction_bom.coordinate_key import CoordinateKey
from fraction_bom.errors import DependencyFormatError
from fraction_bom.scope import Scope


@dataclass(frozen=True)
class DependencyMetadata:
    """A dependency coordinate plus its scope."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str | None = None
    packaging: str = "jar"
    scope: Scope = Scope.COMPILE

    @classmethod
    def of(
        cls,
        group_id: str,
        artifact_id: str,
        version: str,
        classifier: str | None = None,
        packaging: str = "jar",
        scope: str | None = None,
    ) -> "DependencyMetadata":
        """Build a descriptor from raw strings, normalizing the scope."""
        return cls(
            group_id,
            artifact_id,
            version,
            classifier,
            packaging,
            Scope.of(scope),
        )

    @classmethod
    def from_string(cls, text: str) -> "DependencyMetadata":
        """Parse ``group:artifact:packaging[:classifier]:version``.

        The scope of a parsed descriptor is always COMPILE. An empty fifth-form
        classifier (``g:a:jar::1``) parses as ``""``, mirroring how it renders.
        """
        parts = text.strip().split(":")
        if len(parts) == 4:
            group_id, artifact_id, packaging, version = parts
            classifier = None
        elif len(parts) == 5:
            group_id, artifact_id, packaging, classifier, version = parts
        else:
            msg = f"expected 4 or 5 fields, got {len(parts)}"
            raise DependencyFormatError(text, msg)

        if not all(p for p in (group_id, artifact_id, packaging, version)):
            raise DependencyFormatError(text, "empty coordinate field")
        return cls(group_id, artifact_id, version, classifier, packaging)

    def key(self) -> CoordinateKey:
        return CoordinateKey.of_dependency(self)

    @property
    def scope_value(self) -> str:
        """Lowercase scope name, as written into build files."""
        return self.scope.value

    def has_default_scope(self) -> bool:
        return self.scope is Scope.COMPILE

    def to_dict(self) -> dict[str, Any]:
        """Compact serialized form; scope only appears when it is not the default."""
        data: dict[str, Any] = {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
        }
        if not self.has_default_scope():
            data["scope"] = self.scope_value
        return data

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id, self.packaging]
        if self.classifier is not None:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)
