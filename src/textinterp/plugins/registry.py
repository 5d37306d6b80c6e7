from __future__ import annotations

"""
Named classifier factories.

Selecting ``plugin:<name>`` (CLI ``--classifier`` or TEXTINTERP_CLASSIFIER)
looks the factory up here. The built-in apostrophe convention is registered
as "apostrophe"; applications register their own conventions at import time.
"""

from typing import Callable, Dict, List, Optional

from textinterp.core.interfaces.classifier import TokenClassifierProtocol
from textinterp.processing.token_classifier import ApostropheClassifier

ClassifierFactory = Callable[[], TokenClassifierProtocol]

_CLASSIFIER_FACTORIES: Dict[str, ClassifierFactory] = {
    'apostrophe': ApostropheClassifier,
}


def _key(name: str) -> str:
    return (name or '').strip().lower()


def register_classifier(name: str, factory: ClassifierFactory) -> None:
    key = _key(name)
    if not key:
        raise ValueError('classifier name must be non-empty')
    _CLASSIFIER_FACTORIES[key] = factory


def unregister_classifier(name: str) -> None:
    _CLASSIFIER_FACTORIES.pop(_key(name), None)


def get_classifier(name: str) -> Optional[ClassifierFactory]:
    return _CLASSIFIER_FACTORIES.get(_key(name))


def available_classifiers() -> List[str]:
    return sorted(_CLASSIFIER_FACTORIES)
