"""Tests for scope and stability level parsing."""

import pytest

from fraction_bom.scope import Scope
from fraction_bom.stability_level import StabilityLevel


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("compile", Scope.COMPILE),
        ("PROVIDED", Scope.PROVIDED),
        ("  import ", Scope.IMPORT),
        ("", Scope.COMPILE),
        (None, Scope.COMPILE),
        ("whatever", Scope.COMPILE),
    ],
)
def test_scope_of(text: str | None, expected: Scope) -> None:
    """Verify lenient scope parsing."""
    assert Scope.of(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("stable", StabilityLevel.STABLE),
        ("Experimental", StabilityLevel.EXPERIMENTAL),
        ("LOCKED", StabilityLevel.LOCKED),
        ("rock-solid", StabilityLevel.UNSTABLE),
        ("", StabilityLevel.UNSTABLE),
        (None, StabilityLevel.UNSTABLE),
    ],
)
def test_stability_of(text: str | None, expected: StabilityLevel) -> None:
    """Verify that unknown stability names fall back to unstable."""
    assert StabilityLevel.of(text) is expected
