"""Tests for the fraction metadata builder and the frozen result."""

from pathlib import Path

import pytest

from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.fraction_metadata_builder import FractionMetadataBuilder
from fraction_bom.scope import Scope
from fraction_bom.stability_level import StabilityLevel


def test_add_dependency_replaces_equal_key() -> None:
    """Verify last-write-wins per coordinate key."""
    builder = FractionMetadataBuilder("g", "frac", "1.0")
    first = DependencyMetadata("g", "a", "1")
    second = DependencyMetadata.of("g", "a", "1", scope="runtime")
    other = DependencyMetadata("g", "b", "1")

    builder.add_dependency(first)
    builder.add_dependency(other)
    builder.add_dependency(second)

    assert len(builder.dependencies) == 2
    assert second in builder.dependencies
    assert first not in builder.dependencies


def test_transitive_dependencies_are_deduplicated() -> None:
    """Verify that repeated manifest entries collapse to one."""
    builder = FractionMetadataBuilder("g", "frac", "1.0")
    builder.add_transitive_dependency(DependencyMetadata.from_string("g:a:jar:1"))
    builder.add_transitive_dependency(DependencyMetadata.from_string("g:a:jar:1"))
    builder.add_transitive_dependency(DependencyMetadata.from_string("g:a:jar:c:1"))
    assert len(builder.build().transitive_dependencies) == 2


def test_build_freezes_fields() -> None:
    """Verify that the built metadata is immutable and detached from the builder."""
    builder = FractionMetadataBuilder("g", "frac", "1.0")
    builder.tags = ["web"]
    builder.add_detector_file(Path("detect/A.java"), Path("/src/detect/A.java"))
    meta = builder.build()

    builder.tags.append("core")
    builder.add_detector_file(Path("detect/B.java"), Path("/src/detect/B.java"))

    assert meta.tags == ("web",)
    assert len(meta.detector_files) == 1
    with pytest.raises(AttributeError):
        meta.internal = True  # type: ignore[misc]


def test_defaults() -> None:
    """Verify the classification defaults."""
    meta = FractionMetadataBuilder("g", "frac", "1.0").build()
    assert meta.stability is StabilityLevel.UNSTABLE
    assert meta.internal is False
    assert meta.tags == ()
    assert meta.bootstrap is None
    assert meta.scope is Scope.COMPILE
    assert not meta.is_fraction()


def test_is_fraction_follows_entry_point() -> None:
    """Verify that a fraction is anything with an entry point."""
    builder = FractionMetadataBuilder("g", "frac", "1.0")
    assert not builder.is_fraction()
    builder.fraction_entry_point = Path("org/g/FracFraction.java")
    assert builder.is_fraction()
    assert builder.build().is_fraction()


def test_to_dependency_carries_scope_override() -> None:
    """Verify that wrapping a unit as a dependency keeps its scope."""
    builder = FractionMetadataBuilder("g", "frac", "1.0", "pom", "import")
    dep = builder.to_dependency()
    assert dep == DependencyMetadata("g", "frac", "1.0", None, "pom", Scope.IMPORT)
    assert builder.build().to_dependency() == dep


def test_to_dict_is_compact() -> None:
    """Verify that only non-default fields are serialized."""
    builder = FractionMetadataBuilder("g", "frac", "1.0")
    builder.name = "Frac"
    builder.add_dependency(DependencyMetadata("g", "a", "1"))
    data = builder.build().to_dict()

    assert data == {
        "groupId": "g",
        "artifactId": "frac",
        "version": "1.0",
        "name": "Frac",
        "stabilityIndex": "unstable",
        "dependencies": [{"groupId": "g", "artifactId": "a", "version": "1"}],
    }
