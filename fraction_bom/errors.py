"""Exception types raised by the fraction metadata core."""


class FractionBomError(Exception):
    """Base class for all fraction-bom errors."""


class DependencyFormatError(FractionBomError, ValueError):
    """Raised when a dependency coordinate is malformed."""

    def __init__(self, text: str, reason: str) -> None:
        """Record the offending text alongside the reason it was rejected."""
        super().__init__(f"Malformed dependency coordinate {text!r}: {reason}")
        self.text = text
        self.reason = reason


class ManifestError(FractionBomError):
    """Raised when a persisted fraction manifest has an unexpected structure."""
