"""
token_classifier – Marker-based template detection for single tokens.

The default convention marks a template with a leading apostrophe:

  • 'noun      → template "noun"
  • ['adj.'..  → prefix "[", template "adj", suffix "'.."
  • plain      → no template

Only the first marker of a token is considered. Whatever follows the
template name (including a second marker) is carried through in the suffix
so a later recursive pass over the reassembled text can pick it up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from textinterp.constants import DEFAULT_MARKER
from textinterp.core.interfaces.classifier import TokenClassifierProtocol
from textinterp.core.models import TemplateSplit


@dataclass(frozen=True)
class ApostropheClassifier(TokenClassifierProtocol):
    """Default classifier: a token is a template when it starts with *marker*.

    ``split`` has two deliberate quirks:
      • the single character terminating the name is dropped when more text
        follows it ("'noun's" → suffix "s")
      • it is kept when it is the last character ("'noun." → suffix ".")
    """

    marker: str = DEFAULT_MARKER

    def __post_init__(self) -> None:
        if not self.marker:
            raise ValueError('template marker must be non-empty')

    def is_template(self, token: str) -> bool:
        return bool(token) and token.startswith(self.marker)

    def split(self, token: str) -> TemplateSplit:
        idx = token.find(self.marker)
        if idx == -1:
            return TemplateSplit.empty()

        start = idx + len(self.marker)
        end = start
        n = len(token)
        while end < n and token[end].isalnum():
            end += 1

        if end == n:
            return TemplateSplit(token[:idx], token[start:], "")
        if end + 1 < n:
            return TemplateSplit(token[:idx], token[start:end], token[end + 1:])
        return TemplateSplit(token[:idx], token[start:end], token[end:])


@dataclass(frozen=True)
class FunctionClassifier(TokenClassifierProtocol):
    """Adapt a pair of plain callables to :class:`TokenClassifierProtocol`."""

    is_template_fn: Callable[[str], bool]
    split_fn: Callable[[str], TemplateSplit]

    def is_template(self, token: str) -> bool:
        return bool(self.is_template_fn(token))

    def split(self, token: str) -> TemplateSplit:
        return self.split_fn(token)


_DEFAULT = ApostropheClassifier()


def is_template(token: str) -> bool:
    """Return True when *token* starts with the default apostrophe marker."""
    return _DEFAULT.is_template(token)


def split_template(token: str) -> TemplateSplit:
    """Split *token* using the default apostrophe convention."""
    return _DEFAULT.split(token)
