from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, Union

from textinterp.errors import InterpolationError

# Template name -> replacement text, or None when the name is unknown.
Resolver = Callable[[str], Optional[str]]

ChoiceValue = Union[str, Sequence[str]]


@dataclass(frozen=True)
class TemplateSplit:
    """A token split around its embedded template name.

    All three fields are slices of the original token. A token without a
    marker yields the all-empty split.
    """
    prefix: str = ""
    template: str = ""
    suffix: str = ""

    @classmethod
    def empty(cls) -> "TemplateSplit":
        return _EMPTY_SPLIT

    @property
    def has_template(self) -> bool:
        return bool(self.template)

    def __bool__(self) -> bool:
        return self.has_template


_EMPTY_SPLIT = TemplateSplit()


@dataclass(frozen=True)
class InterpolationResult:
    """Result-value flavour of an interpolation call."""
    text: Optional[str] = None
    error: Optional[InterpolationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def mapping_resolver(mapping: Mapping[str, str]) -> Resolver:
    """Return a resolver that looks names up in *mapping*."""

    def _resolve(name: str) -> Optional[str]:
        return mapping.get(name)

    return _resolve


def choice_resolver(
    mapping: Mapping[str, ChoiceValue],
    rng: Optional[random.Random] = None,
) -> Resolver:
    """Return a resolver over a mapping whose values may list alternatives.

    A plain string resolves to itself; a sequence of strings resolves to one
    element picked with *rng*. Missing names and empty sequences resolve to
    ``None``.
    """
    picker = rng or random.Random()

    def _resolve(name: str) -> Optional[str]:
        value = mapping.get(name)
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if not value:
            return None
        return picker.choice(list(value))

    return _resolve
