from .classifier import TokenClassifierProtocol
from .engine import InterpolatorProtocol
from .guard import RecursionGuardProtocol
from .templating import TemplateEngineProtocol

__all__ = [
    'TokenClassifierProtocol',
    'InterpolatorProtocol',
    'RecursionGuardProtocol',
    'TemplateEngineProtocol',
]
