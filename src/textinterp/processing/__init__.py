from textinterp.processing.guards import CycleGuard, DepthGuard, GuardPolicy, make_guard
from textinterp.processing.token_classifier import (
    ApostropheClassifier,
    FunctionClassifier,
    is_template,
    split_template,
)

__all__ = [
    'ApostropheClassifier',
    'FunctionClassifier',
    'is_template',
    'split_template',
    'CycleGuard',
    'DepthGuard',
    'GuardPolicy',
    'make_guard',
]
