from __future__ import annotations

"""
Interpolator configuration.

Values come from keyword arguments, TEXTINTERP_* environment variables or
CLI flags (merged with ``with_overrides``):

  TEXTINTERP_MARKER           template marker (default "'")
  TEXTINTERP_GUARD            "depth" or "cycle"
  TEXTINTERP_RECURSION_LIMIT  depth ceiling for the depth policy
  TEXTINTERP_CLASSIFIER       "plugin:<name>" or "module.path:Attr"
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from textinterp.constants import (
    DEFAULT_MARKER,
    DEFAULT_RECURSION_LIMIT,
    ENV_CLASSIFIER,
    ENV_GUARD,
    ENV_MARKER,
    ENV_RECURSION_LIMIT,
)
from textinterp.errors import ConfigurationError
from textinterp.processing.guards import GuardPolicy


@dataclass(frozen=True)
class InterpolatorConfig:
    """Immutable settings used to build a TextInterpolator."""
    marker: str = DEFAULT_MARKER
    policy: GuardPolicy = GuardPolicy.DEPTH
    recursion_limit: int = DEFAULT_RECURSION_LIMIT
    classifier_ref: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.marker:
            raise ConfigurationError('template marker must be non-empty')
        if not isinstance(self.policy, GuardPolicy):
            object.__setattr__(self, 'policy', GuardPolicy.parse(self.policy))
        if self.recursion_limit < 1:
            raise ConfigurationError(f'recursion limit must be >= 1 (got {self.recursion_limit})')

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InterpolatorConfig":
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        marker = env.get(ENV_MARKER)
        if marker is not None:
            kwargs['marker'] = marker
        guard = (env.get(ENV_GUARD) or '').strip()
        if guard:
            kwargs['policy'] = GuardPolicy.parse(guard)
        raw_limit = (env.get(ENV_RECURSION_LIMIT) or '').strip()
        if raw_limit:
            kwargs['recursion_limit'] = _parse_limit(raw_limit, ENV_RECURSION_LIMIT)
        ref = (env.get(ENV_CLASSIFIER) or '').strip()
        if ref:
            kwargs['classifier_ref'] = ref

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "InterpolatorConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def _parse_limit(raw: str, origin: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f'{origin} expects an integer (got {raw!r})') from None
