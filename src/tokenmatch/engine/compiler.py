"""Pattern compiler: turns pattern text into a token sequence."""
from __future__ import annotations

import logging
from functools import lru_cache

from .matcher import Matcher
from .models import DEFAULT_OPTIONS, CompileOptions, TrailingText
from .tokens import (
    GROUP_CLOSE,
    GROUP_OPEN,
    SEPARATOR,
    WILDCARD,
    Alternation,
    Literal,
    Token,
    Wildcard,
)

logger = logging.getLogger(__name__)


class MalformedPattern(ValueError):
    """Raised when a pattern cannot be compiled.

    ``position`` is the offset of the offending character, or the pattern
    length when a group is left open.
    """

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(pattern, position, reason)

    def __str__(self) -> str:
        return f"{self.reason} at offset {self.position} in pattern {self.pattern!r}"


def tokenize(pattern: str, options: CompileOptions | None = None) -> tuple[Token, ...]:
    """Scan ``pattern`` once, left to right, and return its tokens.

    A bare-text run is closed by any delimiter. Inside a group, ``|`` and
    ``)`` turn the run into an option; ``.`` still closes it into a literal
    and emits the wildcard straight away without leaving the group.
    """
    options = options or DEFAULT_OPTIONS
    tokens: list[Token] = []

    in_text = False
    text_start = 0

    in_group = False
    group_start = 0
    group_options: list[str] = []

    for i, ch in enumerate(pattern):
        if ch == WILDCARD:
            if in_text:
                tokens.append(Literal(pattern[text_start:i], text_start, i))
                in_text = False
            tokens.append(Wildcard(i, i + 1))
        elif ch == GROUP_OPEN:
            if in_group:
                raise MalformedPattern(pattern, i, "nested group")
            if in_text:
                tokens.append(Literal(pattern[text_start:i], text_start, i))
                in_text = False
            in_group = True
            group_start = i
        elif ch == GROUP_CLOSE:
            if not in_group:
                raise MalformedPattern(pattern, i, "unmatched ')'")
            if in_text:
                group_options.append(pattern[text_start:i])
                in_text = False
            tokens.append(Alternation(tuple(group_options), group_start, i + 1))
            in_group = False
            group_options = []
        elif ch == SEPARATOR:
            if not in_group:
                raise MalformedPattern(pattern, i, "'|' outside a group")
            if not in_text:
                raise MalformedPattern(pattern, i, "empty option before '|'")
            group_options.append(pattern[text_start:i])
            in_text = False
        elif not in_text:
            in_text = True
            text_start = i

    if in_group:
        raise MalformedPattern(pattern, len(pattern), "unclosed group")

    if in_text:
        if options.trailing_text is TrailingText.EMIT:
            tokens.append(Literal(pattern[text_start:], text_start, len(pattern)))
        else:
            logger.debug("dropping trailing text %r", pattern[text_start:])

    return tuple(tokens)


def compile(pattern: str, options: CompileOptions | None = None) -> Matcher:
    """Compile ``pattern`` into a fresh :class:`Matcher`.

    Raises :class:`MalformedPattern` on nested or unbalanced groups and on
    misplaced separators. No partially built matcher is ever returned.
    """
    options = options or DEFAULT_OPTIONS
    try:
        tokens = tokenize(pattern, options)
    except MalformedPattern as exc:
        logger.debug("rejected pattern: %s", exc)
        raise
    logger.debug("compiled %r into %d tokens", pattern, len(tokens))
    return Matcher(pattern, tokens, options)


@lru_cache(maxsize=1024)
def compile_cached(pattern: str, options: CompileOptions | None = None) -> Matcher:
    """Like :func:`compile`, but shares one matcher per ``(pattern, options)``.

    The shared matcher's ``most_tokens_matched`` is meaningless to callers;
    use :meth:`Matcher.trace` on it.
    """
    return compile(pattern, options)
