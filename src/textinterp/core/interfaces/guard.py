from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class RecursionGuardProtocol(Protocol):
    """Bounds recursive expansion for a single interpolation call."""

    @property
    def depth(self) -> int:
        ...

    def enter(self, name: str) -> None:
        """Record a descent into *name*; raise when the policy forbids it."""
        ...

    def leave(self, name: str) -> None:
        ...

    def reset(self) -> None:
        ...
