from __future__ import annotations

"""Project-wide constants used across modules."""

# Default template marker: a token such as "'noun" names the template "noun".
DEFAULT_MARKER: str = "'"

# Depth ceiling for the depth-bounded guard policy.
DEFAULT_RECURSION_LIMIT: int = 25

ENV_MARKER: str = 'TEXTINTERP_MARKER'
ENV_GUARD: str = 'TEXTINTERP_GUARD'
ENV_RECURSION_LIMIT: str = 'TEXTINTERP_RECURSION_LIMIT'
ENV_CLASSIFIER: str = 'TEXTINTERP_CLASSIFIER'
ENV_TRACE: str = 'TEXTINTERP_TRACE'
