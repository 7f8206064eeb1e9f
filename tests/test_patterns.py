import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.patterns import regex_match, wildcard_match

lower = st.text(alphabet="abc", max_size=12)


@given(lower)
def test_literal_pattern_matches_itself(s):
    assert regex_match(s, s) is True
    assert wildcard_match(s, s) is True


@given(lower)
def test_extra_character_breaks_match(s):
    assert regex_match(s + "a", s) is False
    assert wildcard_match(s + "a", s) is False


@given(lower)
def test_regex_dot_star_matches_anything(s):
    assert regex_match(s, ".*") is True


@given(lower)
def test_regex_dots_match_exact_length(s):
    assert regex_match(s, "." * len(s)) is True
    assert regex_match(s, "." * (len(s) + 1)) is False


@given(lower, lower)
def test_regex_prefix_then_dot_star(a, b):
    assert regex_match(a + b, a + ".*") is True


@given(st.integers(0, 8))
def test_regex_star_repeats(k):
    assert regex_match("a" * k, "a*") is True
    assert regex_match("a" * k + "b", "a*") is False


@given(lower)
def test_regex_star_may_match_nothing(s):
    assert regex_match(s, "x*" + s + "z*") is True


def test_regex_examples():
    assert regex_match("aab", "c*a*b") is True
    assert regex_match("aa", "a") is False


def test_regex_rejects_leading_star():
    with pytest.raises(ValueError):
        regex_match("a", "*a")


@given(lower)
def test_wildcard_star_matches_anything(s):
    assert wildcard_match(s, "*") is True
    assert wildcard_match(s, "**") is True


@given(lower)
def test_wildcard_question_marks_match_exact_length(s):
    assert wildcard_match(s, "?" * len(s)) is True
    assert wildcard_match(s, "?" * (len(s) + 1)) is False


@given(lower, lower)
def test_wildcard_star_around_fixed_parts(a, b):
    assert wildcard_match(a + b, "*" + b) is True
    assert wildcard_match(a + b, a + "*") is True
    assert wildcard_match(a + "c" + b, a + "*" + b) is True


def test_wildcard_empty_pattern():
    assert wildcard_match("", "") is True
    assert wildcard_match("a", "") is False


def test_wildcard_example():
    assert wildcard_match("adceb", "*a*b") is True
    assert wildcard_match("cb", "?a") is False