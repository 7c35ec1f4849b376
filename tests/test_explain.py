"""Tests for explanation helpers."""

from tokenmatch import CompileOptions, compile, describe_tokens, explain_dict, explain_text


def test_describe_tokens(choice_matcher) -> None:
    rows = describe_tokens(choice_matcher)
    assert [row["kind"] for row in rows] == ["literal", "alternation", "wildcard"]
    assert rows[0]["text"] == "abc"
    assert rows[1]["options"] == ["d", "e", "f"]
    assert rows[1]["span"] == [3, 10]
    assert "text" not in rows[2] and "options" not in rows[2]


def test_explain_dict(choice_matcher) -> None:
    payload = explain_dict(choice_matcher, "abcge")
    assert payload["tokens_matched"] == 1
    assert payload["tokens_total"] == 3
    assert payload["complete"] is False
    assert [row["matched"] for row in payload["tokens"]] == ["abc", None, None]
    assert payload["options"] == {"trailing_text": "emit", "alternation": "any"}


def test_explain_dict_does_not_touch_counter(choice_matcher) -> None:
    explain_dict(choice_matcher, "abcde")
    assert choice_matcher.most_tokens_matched == 0


def test_explain_text(choice_matcher) -> None:
    text = explain_text(choice_matcher, "abcge")
    assert "PATTERN:   abc(d|e|f)." in text
    assert "MATCHED:   1/3 tokens" in text
    lines = text.splitlines()
    assert "ok" in lines[3]
    assert lines[4].endswith("FAIL")
    assert lines[5].endswith("--")


def test_explain_text_remainder() -> None:
    matcher = compile("ab", CompileOptions(trailing_text="emit"))
    text = explain_text(matcher, "abzz")
    assert "MATCHED:   1/1 tokens" in text
    assert "REMAINDER: 'zz'" in text
