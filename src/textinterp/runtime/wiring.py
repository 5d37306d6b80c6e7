from __future__ import annotations

import logging
from typing import Optional

from textinterp.core.interfaces.classifier import TokenClassifierProtocol
from textinterp.logging.helpers import get_logger
from textinterp.plugins.registry import get_classifier
from textinterp.processing.guards import make_guard
from textinterp.processing.token_classifier import ApostropheClassifier
from textinterp.rendering.interpolator import TextInterpolator
from textinterp.runtime.config import InterpolatorConfig
from textinterp.utils.imports import load_object_from_ref


def build_classifier(config: InterpolatorConfig, logger: Optional[logging.Logger] = None) -> TokenClassifierProtocol:
    """Build the token classifier selected by *config*.

    Resolution order for ``classifier_ref``:
        1) 'plugin:<name>' → registry factory
        2) 'module.path:Attr' → dynamic import, called with no arguments
        3) empty / 'none' → ApostropheClassifier(config.marker)
    Unknown plugins and failed imports fall back to the default classifier.
    """
    log = logger or get_logger('wiring')
    default = ApostropheClassifier(config.marker)
    ref = (config.classifier_ref or '').strip()
    if not ref or ref.lower() == 'none':
        return default

    if ref.startswith('plugin:'):
        name = ref.split(':', 1)[1].strip()
        factory = get_classifier(name)
        if factory is None:
            log.warning('⚠  unknown classifier plugin %r – falling back to ApostropheClassifier', name)
            return default
        try:
            classifier = factory()
        except Exception as exc:
            log.warning('⚠  classifier plugin %r failed: %s  → falling back to ApostropheClassifier', name, exc)
            return default
    else:
        try:
            classifier = load_object_from_ref(ref)()
        except Exception as exc:
            log.warning('⚠  failed to load classifier %r: %s  → falling back to ApostropheClassifier', ref, exc)
            return default

    if not isinstance(classifier, TokenClassifierProtocol):
        log.warning('⚠  %r did not produce a token classifier → falling back to ApostropheClassifier', ref)
        return default
    return classifier


def build_interpolator(
    config: Optional[InterpolatorConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> TextInterpolator:
    """Wire classifier and guard policy into a ready-to-use TextInterpolator."""
    cfg = config or InterpolatorConfig.from_env()
    return TextInterpolator(
        classifier=build_classifier(cfg, logger),
        guard=make_guard(cfg.policy, cfg.recursion_limit),
        logger=logger,
    )
