"""Explanation helpers for compiled patterns and match traces."""
from __future__ import annotations

from .matcher import Matcher
from .tokens import Alternation, Literal


def describe_tokens(matcher: Matcher) -> list[dict[str, object]]:
    """One row per compiled token: kind, pattern text, span and payload."""
    rows: list[dict[str, object]] = []
    for index, token in enumerate(matcher.tokens):
        row: dict[str, object] = {
            "index": index,
            "kind": token.kind,
            "pattern": token.to_pattern(),
            "span": [token.start, token.end],
        }
        if isinstance(token, Literal):
            row["text"] = token.text
        elif isinstance(token, Alternation):
            row["options"] = list(token.options)
        rows.append(row)
    return rows


def explain_dict(matcher: Matcher, candidate: str) -> dict[str, object]:
    """Trace ``candidate`` and return a JSON-ready report of every token."""
    trace = matcher.trace(candidate)
    rows = describe_tokens(matcher)
    for row, (_, text) in zip(rows, trace.pairs):
        row["matched"] = text
    for row in rows[trace.tokens_matched :]:
        row["matched"] = None
    return {
        "pattern": matcher.pattern,
        "candidate": candidate,
        "options": {
            "trailing_text": matcher.options.trailing_text.value,
            "alternation": matcher.options.alternation.value,
        },
        "tokens_matched": trace.tokens_matched,
        "tokens_total": trace.tokens_total,
        "complete": trace.complete,
        "remainder": trace.remainder,
        "tokens": rows,
    }


def explain_text(matcher: Matcher, candidate: str) -> str:
    """Render a trace as a short report, one row per token.

    Rows are marked ``ok`` for matched tokens, ``FAIL`` for the token where
    matching stopped and ``--`` for tokens never reached.
    """
    trace = matcher.trace(candidate)
    lines = [
        f"PATTERN:   {matcher.pattern}",
        f"CANDIDATE: {candidate}",
        f"MATCHED:   {trace.tokens_matched}/{trace.tokens_total} tokens",
    ]
    for index, token in enumerate(matcher.tokens):
        if index < trace.tokens_matched:
            status = f"ok    {trace.pairs[index][1]!r}"
        elif index == trace.tokens_matched:
            status = "FAIL"
        else:
            status = "--"
        lines.append(f"  {index}: {token.to_pattern():<12} {token.kind:<11} {status}")
    if trace.complete and trace.remainder:
        lines.append(f"REMAINDER: {trace.remainder!r}")
    return "\n".join(lines)
