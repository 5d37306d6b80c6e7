from __future__ import annotations
from typing import Protocol, runtime_checkable

from textinterp.core.models import TemplateSplit


@runtime_checkable
class TokenClassifierProtocol(Protocol):
    """Protocol for template detection on whitespace-delimited tokens.

    Implementations decide which marker convention applies:
      * is_template: whether the token itself marks a template
      * split: where the template name sits inside the token
    """

    def is_template(self, token: str) -> bool:
        ...

    def split(self, token: str) -> TemplateSplit:
        """Return (prefix, template, suffix); all-empty when no marker is present."""
        ...
