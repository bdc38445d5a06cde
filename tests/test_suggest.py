"""Tests for "did you mean" suggestions."""

import pytest

from modtrace._internal.suggest import prepare_extended_message, string_match_ratio


@pytest.mark.parametrize(
    "a,b,want",
    [
        ("abc", "abc", 1.0),
        ("", "", 1.0),
        ("", "abc", 0.0),
        ("abcd", "abXd", 0.75),
        ("abc", "abcdef", 1.0),
        ("xyz", "abc", 0.0),
    ],
)
def test_string_match_ratio(a, b, want):
    assert string_match_ratio(a, b) == pytest.approx(want)


def test_message_with_suggestion():
    names = ["github.com/pkg/errors@v0.9.1", "golang.org/x/text@v0.3.0"]
    msg = prepare_extended_message(names, 0.9, "golang.org/x/text@v0.3.1", "target")
    assert msg == (
        "No target package: 'golang.org/x/text@v0.3.1' found in package index, "
        "did you mean 'golang.org/x/text@v0.3.0'?"
    )


def test_message_without_suggestion():
    msg = prepare_extended_message(["A", "B"], 0.9, "Q", "parent")
    assert msg == "No parent package: 'Q' found in package index, check input"


def test_message_first_candidate_wins():
    names = ["module@v1.0.1", "module@v1.0.2"]
    msg = prepare_extended_message(names, 0.9, "module@v1.0.3", "parent")
    assert msg.endswith("did you mean 'module@v1.0.1'?")


def test_ratio_must_strictly_exceed_threshold():
    # 9 of 10 characters match: ratio 0.9 is not above 0.9
    msg = prepare_extended_message(["abcdefghij"], 0.9, "abcdefghiX", "parent")
    assert msg.endswith("check input")
