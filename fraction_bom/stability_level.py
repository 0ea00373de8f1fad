"""Stability levels a fraction can declare."""

from enum import Enum


class StabilityLevel(Enum):
    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"
    UNSTABLE = "unstable"
    STABLE = "stable"
    FROZEN = "frozen"
    LOCKED = "locked"

    @classmethod
    def of(cls, text: str | None) -> "StabilityLevel":
        """Parse a level name case-insensitively; unknown names are UNSTABLE."""
        if not text:
            return cls.UNSTABLE
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return cls.UNSTABLE
