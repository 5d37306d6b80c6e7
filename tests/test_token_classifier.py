from __future__ import annotations

import pytest

from textinterp import ApostropheClassifier, FunctionClassifier, TemplateSplit, is_template, split_template


@pytest.mark.parametrize(
    "token, expected",
    [
        ("['adj.'..'.]", ("[", "adj", "'..'.]")),
        ("'noun's", ("", "noun", "s")),
        ("'noun", ("", "noun", "")),
        ("'noun.", ("", "noun", ".")),
        ("'noun!", ("", "noun", "!")),
        ("'noun'noun", ("", "noun", "noun")),
        ("Story:'paragraph...", ("Story:", "paragraph", "..")),
        ("'verb'ing", ("", "verb", "ing")),
    ],
)
def test_split_reference_cases(token, expected):
    parts = split_template(token)
    assert (parts.prefix, parts.template, parts.suffix) == expected


@pytest.mark.parametrize("token", ["noun", "plain.", "", "[brackets]", "I’m"])
def test_tokens_without_marker_are_not_templates(token):
    assert split_template(token) == TemplateSplit.empty()
    assert split_template(token) == TemplateSplit("", "", "")
    assert not is_template(token)


def test_is_template_only_checks_first_character():
    assert is_template("'noun")
    assert is_template("'")
    assert not is_template("x'noun")
    assert not is_template("")


def test_lone_marker_has_empty_template():
    parts = split_template("'")
    assert parts == TemplateSplit("", "", "")
    assert not parts


def test_marker_followed_by_punctuation_has_empty_template():
    parts = split_template("'.x")
    assert parts.template == ""
    assert parts.suffix == "x"
    assert not parts.has_template


def test_unicode_letters_are_part_of_the_name():
    parts = split_template("'café!")
    assert parts.template == "café"
    assert parts.suffix == "!"


def test_custom_marker():
    classifier = ApostropheClassifier(marker="$")
    assert classifier.is_template("$name")
    assert not classifier.is_template("'name")
    assert classifier.split("($name),") == TemplateSplit("(", "name", ",")


def test_multi_character_marker():
    classifier = ApostropheClassifier(marker="@@")
    assert classifier.split("x@@who?") == TemplateSplit("x", "who", "?")
    assert classifier.split("x@who?") == TemplateSplit.empty()


def test_empty_marker_is_rejected():
    with pytest.raises(ValueError):
        ApostropheClassifier(marker="")


def test_function_classifier_delegates():
    calls = []

    def _split(token: str) -> TemplateSplit:
        calls.append(token)
        if token.startswith("%"):
            return TemplateSplit("", token[1:], "")
        return TemplateSplit.empty()

    classifier = FunctionClassifier(lambda t: t.startswith("%"), _split)
    assert classifier.is_template("%x")
    assert not classifier.is_template("'x")
    assert classifier.split("%x").template == "x"
    assert calls == ["%x"]
