"""
guards – Recursion guard policies for the interpolation engine.

Two policies are available and they are not interchangeable:

  • DepthGuard  bounds the depth of nested expansion. A self-referencing
                template is only stopped once the ceiling is reached.
  • CycleGuard  tracks the template names on the active expansion path and
                fails as soon as one of them re-enters. Reusing a name in a
                sibling branch is fine; expansion that never repeats a name
                is not bounded.
"""

from __future__ import annotations

import enum
from typing import List, Optional, Tuple

from textinterp.constants import DEFAULT_RECURSION_LIMIT
from textinterp.core.interfaces.guard import RecursionGuardProtocol
from textinterp.errors import ConfigurationError, RecursionLimitExceeded, SubstitutionCycleDetected


class GuardPolicy(str, enum.Enum):
    DEPTH = 'depth'
    CYCLE = 'cycle'

    @classmethod
    def parse(cls, value: str) -> "GuardPolicy":
        key = (value or '').strip().lower()
        for member in cls:
            if member.value == key:
                return member
        choices = ', '.join(m.value for m in cls)
        raise ConfigurationError(f"unknown guard policy {value!r} (expected one of: {choices})")


class DepthGuard(RecursionGuardProtocol):
    def __init__(self, limit: int = DEFAULT_RECURSION_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f'recursion limit must be >= 1 (got {limit})')
        self._limit = int(limit)
        self._depth = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def depth(self) -> int:
        return self._depth

    def enter(self, name: str) -> None:
        if self._depth + 1 >= self._limit:
            raise RecursionLimitExceeded(self._limit, name, self._depth + 1)
        self._depth += 1

    def leave(self, name: str) -> None:
        if self._depth > 0:
            self._depth -= 1

    def reset(self) -> None:
        self._depth = 0

    def __repr__(self) -> str:
        return f'DepthGuard(limit={self._limit}, depth={self._depth})'


class CycleGuard(RecursionGuardProtocol):
    def __init__(self) -> None:
        self._path: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._path)

    @property
    def path(self) -> Tuple[str, ...]:
        return tuple(self._path)

    def enter(self, name: str) -> None:
        if name in self._path:
            # Report the loop starting at the first occurrence of *name*.
            first = self._path.index(name)
            raise SubstitutionCycleDetected(name, self._path[first:])
        self._path.append(name)

    def leave(self, name: str) -> None:
        if self._path and self._path[-1] == name:
            self._path.pop()
        elif name in self._path:
            del self._path[len(self._path) - 1 - self._path[::-1].index(name)]

    def reset(self) -> None:
        self._path.clear()

    def __repr__(self) -> str:
        return f'CycleGuard(path={self._path!r})'


def make_guard(policy: GuardPolicy | str = GuardPolicy.DEPTH, limit: Optional[int] = None) -> RecursionGuardProtocol:
    """Build a guard for *policy*; *limit* only applies to the depth policy."""
    if not isinstance(policy, GuardPolicy):
        policy = GuardPolicy.parse(policy)
    if policy is GuardPolicy.CYCLE:
        return CycleGuard()
    return DepthGuard(DEFAULT_RECURSION_LIMIT if limit is None else limit)
