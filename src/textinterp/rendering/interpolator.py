"""
interpolator – Recursive whitespace-token template interpolation.

The engine walks the input token by token:

  • tokens without a template, or whose name the resolver does not know,
    are emitted verbatim (marker included)
  • known names are replaced by ``prefix + replacement + suffix``
  • a replacement that itself contains templates is interpolated once more,
    under the recursion guard

Output tokens are joined by single spaces and stripped at both ends.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from textinterp.core.interfaces.classifier import TokenClassifierProtocol
from textinterp.core.interfaces.engine import InterpolatorProtocol
from textinterp.core.interfaces.guard import RecursionGuardProtocol
from textinterp.core.models import InterpolationResult, Resolver
from textinterp.core.report import InterpolationReport
from textinterp.errors import InterpolationError
from textinterp.logging.helpers import get_logger, trace_substitution
from textinterp.processing.guards import DepthGuard
from textinterp.processing.token_classifier import ApostropheClassifier


class TextInterpolator(InterpolatorProtocol):
    """Interpolation engine parameterised by a classifier and a guard policy.

    The guard is per-instance state. Calls on one instance must not overlap
    across threads; use one instance per logical call or lock externally.
    A resolver may call back into the same instance: such a call is treated
    as a nested descent of the call already in progress.
    """

    def __init__(
        self,
        *,
        classifier: Optional[TokenClassifierProtocol] = None,
        guard: Optional[RecursionGuardProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._classifier = classifier or ApostropheClassifier()
        self._guard = guard or DepthGuard()
        self._log = logger or get_logger('engine')
        self._active_calls = 0
        # Names whose resolver call is in progress, innermost last.
        self._resolving: List[str] = []

    @property
    def classifier(self) -> TokenClassifierProtocol:
        return self._classifier

    @property
    def guard(self) -> RecursionGuardProtocol:
        return self._guard

    def interp(self, text: str, resolver: Resolver, *, report: Optional[InterpolationReport] = None) -> str:
        """Interpolate *text* through *resolver*.

        Raises:
            RecursionLimitExceeded: depth policy ceiling reached.
            SubstitutionCycleDetected: cycle policy saw a name re-enter.
        """
        nested = self._active_calls > 0
        self._active_calls += 1
        try:
            if not nested:
                return self._interp(text, resolver, report)
            # Called back from a resolver: one more descent under the name
            # that resolver is answering for.
            name = self._resolving[-1] if self._resolving else ''
            self._guard.enter(name)
            try:
                return self._interp(text, resolver, report)
            finally:
                self._guard.leave(name)
        except InterpolationError as exc:
            if report is not None:
                report.error = exc.kind
            self._log.debug('interpolation aborted: %s', exc, extra={'error_kind': exc.kind})
            raise
        finally:
            self._active_calls -= 1
            if self._active_calls == 0:
                self._guard.reset()
                self._resolving.clear()
                if report is not None:
                    report.finish()

    def try_interp(
        self, text: str, resolver: Resolver, *, report: Optional[InterpolationReport] = None
    ) -> InterpolationResult:
        """Like :meth:`interp` but returns the failure as a value."""
        try:
            return InterpolationResult(text=self.interp(text, resolver, report=report))
        except InterpolationError as exc:
            return InterpolationResult(error=exc)

    def contains_template(self, text: str) -> bool:
        return any(self._classifier.is_template(tok) for tok in text.split())

    def is_fully_resolved(self, text: str) -> bool:
        return not self.contains_template(text)

    def _interp(self, text: str, resolver: Resolver, report: Optional[InterpolationReport]) -> str:
        out: List[str] = []
        for token in text.split():
            parts = self._classifier.split(token)
            if not parts.template:
                out.append(token)
                continue

            self._resolving.append(parts.template)
            try:
                replacement = resolver(parts.template)
            finally:
                self._resolving.pop()
            if replacement is None:
                self._log.debug('unresolved template %r left as-is', parts.template)
                if report is not None:
                    report.record_unresolved(parts.template)
                out.append(token)
                continue

            if self.contains_template(replacement):
                self._guard.enter(parts.template)
                try:
                    replacement = self._interp(replacement, resolver, report)
                finally:
                    self._guard.leave(parts.template)

            depth = self._guard.depth
            trace_substitution(self._log, parts.template, replacement, depth)
            if report is not None:
                report.record_substitution(depth)
            out.append(parts.prefix + replacement + parts.suffix)

        return ' '.join(out).strip()
