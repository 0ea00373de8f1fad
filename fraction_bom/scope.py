"""Dependency scopes."""

from enum import Enum


class Scope(Enum):
    """Dependency scope of a coordinate inside a build."""

    COMPILE = "compile"
    TEST = "test"
    RUNTIME = "runtime"
    PROVIDED = "provided"
    SYSTEM = "system"
    IMPORT = "import"

    @classmethod
    def of(cls, text: str | None) -> "Scope":
        """Parse a scope name, falling back to COMPILE for unknown input."""
        if text is not None:
            wanted = text.strip().lower()
            for value in cls:
                if value.value == wanted:
                    return value
        return cls.COMPILE
