"""Tests for token types."""

from tokenmatch import Alternation, Literal, Wildcard
from tokenmatch.engine.tokens import render_pattern


def test_equality_ignores_spans() -> None:
    assert Literal("abc", 0, 3) == Literal("abc", 5, 8)
    assert Wildcard(0, 1) == Wildcard(4, 5)
    assert hash(Alternation(("a", "b"), 0, 5)) == hash(Alternation(["a", "b"]))


def test_alternation_options_become_tuple() -> None:
    token = Alternation(["x", "y"])
    assert token.options == ("x", "y")


def test_match_at() -> None:
    assert Literal("bc").match_at("abcd", 1) == "bc"
    assert Literal("bc").match_at("abcd", 2) is None
    assert Wildcard().match_at("ab", 1) == "b"
    assert Wildcard().match_at("ab", 2) is None
    choice = Alternation(("x", "b"))
    assert choice.match_at("ab", 1) == "b"
    assert choice.match_at("ab", 1, first_option_only=True) is None


def test_render_pattern() -> None:
    tokens = [Literal("abc"), Alternation(("d", "e")), Wildcard()]
    assert render_pattern(tokens) == "abc(d|e)."
    assert [token.kind for token in tokens] == ["literal", "alternation", "wildcard"]
