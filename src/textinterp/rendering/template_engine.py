"""
template_engine – TemplateEngineProtocol adapter over TextInterpolator.

Lets callers that only know the ``render(template, variables)`` surface use
apostrophe templates with a plain mapping of replacements.
"""

import logging
from typing import Mapping, Optional

from textinterp.core.interfaces.engine import InterpolatorProtocol
from textinterp.core.interfaces.templating import TemplateEngineProtocol
from textinterp.core.models import mapping_resolver
from textinterp.errors import InterpolationError
from textinterp.logging.helpers import get_logger
from textinterp.rendering.interpolator import TextInterpolator


class ApostropheTemplateEngine(TemplateEngineProtocol):
    """Render ``'name`` templates from a mapping of replacements.

    With ``strict=False`` a failed render is logged and the template is
    returned unchanged instead of raising.
    """

    def __init__(
        self,
        *,
        interpolator: Optional[InterpolatorProtocol] = None,
        strict: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._interp = interpolator or TextInterpolator()
        self._strict = bool(strict)
        self._log = logger or get_logger('templates')

    def render(self, template: str, variables: Mapping[str, str]) -> str:  # type: ignore[override]
        """Render *template* replacing templates via *variables*."""
        # Snapshot so resolver lookups never observe caller mutations mid-render.
        resolver = mapping_resolver(dict(variables))
        try:
            return self._interp.interp(template, resolver)
        except InterpolationError as exc:
            if self._strict:
                raise
            self._log.error('template rendering failed: %s', exc)
            return template
