from __future__ import annotations

"""
Protocol describing the interpolation surface.

The concrete engine lives in ``textinterp.rendering.interpolator``; other
modules (template engine adapter, CLI) only depend on this contract.
"""

from typing import Optional, Protocol, runtime_checkable

from textinterp.core.models import InterpolationResult, Resolver
from textinterp.core.report import InterpolationReport


@runtime_checkable
class InterpolatorProtocol(Protocol):
    def interp(self, text: str, resolver: Resolver, *, report: Optional[InterpolationReport] = None) -> str:
        ...

    def try_interp(
        self, text: str, resolver: Resolver, *, report: Optional[InterpolationReport] = None
    ) -> InterpolationResult:
        ...

    def contains_template(self, text: str) -> bool:
        ...
