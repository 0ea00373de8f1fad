"""Input records describing a build unit, as supplied by the build model."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DeclaredDependency:
    """A dependency exactly as a build unit declares it."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str | None = None
    type: str = "jar"
    scope: str | None = None  # None means compile


@dataclass
class BuildUnit:
    """One module of a multi-module build."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    name: str | None = None
    description: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    basedir: Path | None = None
    source_directory: Path | None = None
    dependencies: list[DeclaredDependency] = field(default_factory=list)

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)

    def compile_dependencies(self) -> list[DeclaredDependency]:
        """Declared dependencies whose scope is compile (or unspecified)."""
        return [
            d for d in self.dependencies if (d.scope or "compile").strip() == "compile"
        ]
