from __future__ import annotations

from textinterp.constants import DEFAULT_MARKER, DEFAULT_RECURSION_LIMIT
from textinterp.core.models import (
    InterpolationResult,
    Resolver,
    TemplateSplit,
    choice_resolver,
    mapping_resolver,
)
from textinterp.core.report import InterpolationReport
from textinterp.errors import (
    ConfigurationError,
    InterpolationError,
    RecursionLimitExceeded,
    SubstitutionCycleDetected,
)
from textinterp.processing.guards import CycleGuard, DepthGuard, GuardPolicy, make_guard
from textinterp.processing.token_classifier import (
    ApostropheClassifier,
    FunctionClassifier,
    is_template,
    split_template,
)
from textinterp.rendering.interpolator import TextInterpolator
from textinterp.rendering.template_engine import ApostropheTemplateEngine
from textinterp.runtime.config import InterpolatorConfig
from textinterp.runtime.wiring import build_classifier, build_interpolator

__version__ = '0.3.0'


def interpolate(text: str, resolver: Resolver, *, policy: GuardPolicy | str = GuardPolicy.DEPTH) -> str:
    """One-shot helper: interpolate *text* with a fresh default engine."""
    return TextInterpolator(guard=make_guard(policy)).interp(text, resolver)


__all__ = [
    'DEFAULT_MARKER',
    'DEFAULT_RECURSION_LIMIT',
    'TemplateSplit',
    'Resolver',
    'InterpolationResult',
    'InterpolationReport',
    'mapping_resolver',
    'choice_resolver',
    'InterpolationError',
    'RecursionLimitExceeded',
    'SubstitutionCycleDetected',
    'ConfigurationError',
    'ApostropheClassifier',
    'FunctionClassifier',
    'is_template',
    'split_template',
    'DepthGuard',
    'CycleGuard',
    'GuardPolicy',
    'make_guard',
    'TextInterpolator',
    'ApostropheTemplateEngine',
    'InterpolatorConfig',
    'build_classifier',
    'build_interpolator',
    'interpolate',
]
