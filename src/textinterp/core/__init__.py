"""Public surface for textinterp.core: data model, report and protocols.

    from textinterp.core import TemplateSplit, TokenClassifierProtocol, ...
"""

from textinterp.core.interfaces import (
    InterpolatorProtocol,
    RecursionGuardProtocol,
    TemplateEngineProtocol,
    TokenClassifierProtocol,
)
from textinterp.core.models import (
    InterpolationResult,
    Resolver,
    TemplateSplit,
    choice_resolver,
    mapping_resolver,
)
from textinterp.core.report import InterpolationReport

__all__ = [
    "InterpolatorProtocol",
    "RecursionGuardProtocol",
    "TemplateEngineProtocol",
    "TokenClassifierProtocol",
    "InterpolationResult",
    "Resolver",
    "TemplateSplit",
    "choice_resolver",
    "mapping_resolver",
    "InterpolationReport",
]
