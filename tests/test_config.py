from __future__ import annotations

import logging

import pytest

from textinterp import (
    ApostropheClassifier,
    ConfigurationError,
    CycleGuard,
    DepthGuard,
    FunctionClassifier,
    GuardPolicy,
    InterpolatorConfig,
    TemplateSplit,
    build_classifier,
    build_interpolator,
)
from textinterp.plugins.registry import (
    available_classifiers,
    get_classifier,
    register_classifier,
    unregister_classifier,
)
from textinterp.utils.imports import load_object_from_ref


def _percent_classifier() -> FunctionClassifier:
    def _split(token: str) -> TemplateSplit:
        if "%" not in token:
            return TemplateSplit.empty()
        head, _, tail = token.partition("%")
        return TemplateSplit(head, tail, "")

    return FunctionClassifier(lambda t: t.startswith("%"), _split)


class NotAClassifier:
    pass


def test_defaults():
    cfg = InterpolatorConfig()
    assert cfg.marker == "'"
    assert cfg.policy is GuardPolicy.DEPTH
    assert cfg.recursion_limit == 25
    assert cfg.classifier_ref is None


def test_from_env():
    cfg = InterpolatorConfig.from_env(
        {
            "TEXTINTERP_MARKER": "$",
            "TEXTINTERP_GUARD": "cycle",
            "TEXTINTERP_RECURSION_LIMIT": "9",
            "TEXTINTERP_CLASSIFIER": "plugin:apostrophe",
        }
    )
    assert cfg == InterpolatorConfig(
        marker="$", policy=GuardPolicy.CYCLE, recursion_limit=9, classifier_ref="plugin:apostrophe"
    )


def test_from_process_env(monkeypatch):
    monkeypatch.setenv("TEXTINTERP_RECURSION_LIMIT", "4")
    assert InterpolatorConfig.from_env().recursion_limit == 4


@pytest.mark.parametrize(
    "env",
    [
        {"TEXTINTERP_RECURSION_LIMIT": "many"},
        {"TEXTINTERP_RECURSION_LIMIT": "0"},
        {"TEXTINTERP_GUARD": "sometimes"},
        {"TEXTINTERP_MARKER": ""},
    ],
)
def test_from_env_rejects_invalid_values(env):
    with pytest.raises(ConfigurationError):
        InterpolatorConfig.from_env(env)


def test_with_overrides_skips_none():
    cfg = InterpolatorConfig()
    assert cfg.with_overrides(marker=None, policy=None) is cfg
    changed = cfg.with_overrides(policy="cycle", recursion_limit=None)
    assert changed.policy is GuardPolicy.CYCLE
    assert changed.recursion_limit == 25


def test_build_interpolator_uses_policy_and_marker():
    engine = build_interpolator(InterpolatorConfig(marker="$", policy="cycle"))
    assert isinstance(engine.guard, CycleGuard)
    assert engine.interp("$x 'x", {"x": "ok"}.get) == "ok 'x"

    engine = build_interpolator(InterpolatorConfig(recursion_limit=6))
    assert isinstance(engine.guard, DepthGuard)
    assert engine.guard.limit == 6


def test_build_interpolator_reads_env(monkeypatch):
    monkeypatch.setenv("TEXTINTERP_GUARD", "cycle")
    assert isinstance(build_interpolator().guard, CycleGuard)


def test_registry_round_trip():
    register_classifier("Percent", _percent_classifier)
    try:
        assert "percent" in available_classifiers()
        assert get_classifier("PERCENT") is _percent_classifier
        engine = build_interpolator(InterpolatorConfig(classifier_ref="plugin:percent"))
        assert engine.interp("%name here", {"name": "Ada"}.get) == "Ada here"
    finally:
        unregister_classifier("percent")
    assert get_classifier("percent") is None


def test_registry_rejects_empty_name():
    with pytest.raises(ValueError):
        register_classifier("  ", _percent_classifier)


def test_builtin_plugin_is_registered():
    assert "apostrophe" in available_classifiers()
    assert isinstance(build_classifier(InterpolatorConfig(classifier_ref="plugin:apostrophe")), ApostropheClassifier)


def test_module_reference_classifier():
    cfg = InterpolatorConfig(classifier_ref=f"{__name__}:_percent_classifier")
    assert build_classifier(cfg).is_template("%x")


@pytest.mark.parametrize(
    "ref",
    [
        "plugin:missing",
        "no_such_module_xyz:Thing",
        f"{__name__}:missing_attr",
        f"{__name__}:NotAClassifier",
        "os.path:join",
    ],
)
def test_bad_classifier_refs_fall_back(ref, caplog):
    with caplog.at_level(logging.WARNING, logger="textinterp"):
        classifier = build_classifier(InterpolatorConfig(marker="$", classifier_ref=ref))
    assert classifier == ApostropheClassifier("$")
    assert "falling back" in caplog.text


@pytest.mark.parametrize("ref", ["none", "NONE", ""])
def test_none_ref_means_default(ref):
    assert build_classifier(InterpolatorConfig(classifier_ref=ref)) == ApostropheClassifier()


@pytest.mark.parametrize("ref", ["", "nocolon", "mod:", ":attr"])
def test_load_object_from_ref_rejects_malformed(ref):
    with pytest.raises(ImportError):
        load_object_from_ref(ref)


def test_load_object_follows_dotted_attributes():
    assert load_object_from_ref("os.path:join.__name__") == "join"


def test_failing_plugin_factory_falls_back(caplog):
    def _broken() -> FunctionClassifier:
        raise RuntimeError("broken factory")

    register_classifier("broken", _broken)
    try:
        with caplog.at_level(logging.WARNING, logger="textinterp"):
            classifier = build_classifier(InterpolatorConfig(classifier_ref="plugin:broken"))
    finally:
        unregister_classifier("broken")
    assert classifier == ApostropheClassifier()
    assert "broken factory" in caplog.text
