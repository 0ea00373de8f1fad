"""Result value returned by source tree walks."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class WalkResult(Generic[T]):
    """What a walk found, plus every filesystem error it stepped over.

    Walks never raise for I/O problems; callers decide how to report them.
    """

    value: T
    errors: list[OSError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
