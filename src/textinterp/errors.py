"""
errors – Exception hierarchy raised by the interpolation engine.

Both guard failures derive from :class:`InterpolationError`, so callers can
catch a single type and inspect :attr:`InterpolationError.kind` when they need
to tell the policies apart.
"""

from __future__ import annotations

from typing import Sequence


class InterpolationError(Exception):
    """Base class for recoverable interpolation failures."""

    kind: str = "interpolation_error"


class RecursionLimitExceeded(InterpolationError):
    """Raised by the depth policy when nested expansion reaches its ceiling."""

    kind = "recursion_limit_exceeded"

    def __init__(self, limit: int, name: str, depth: int) -> None:
        self.limit = limit
        self.name = name
        self.depth = depth
        super().__init__(
            f"recursion limit of {limit} reached while expanding {name!r} (depth {depth})"
        )


class SubstitutionCycleDetected(InterpolationError):
    """Raised by the cycle policy when a template re-enters its own expansion."""

    kind = "substitution_cycle_detected"

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.name = name
        self.path = tuple(path)
        chain = " -> ".join(list(self.path) + [name])
        super().__init__(f"substitution cycle detected: {chain}")


class ConfigurationError(ValueError):
    """Invalid configuration value (environment, CLI or programmatic)."""
