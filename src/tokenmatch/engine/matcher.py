"""Greedy, single-pass matching of candidates against compiled tokens."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import DEFAULT_OPTIONS, AlternationPolicy, CompileOptions, MatchTrace
from .tokens import Alternation, Token, render_pattern

logger = logging.getLogger(__name__)


class Matcher:
    """A compiled pattern, reusable across many candidates.

    ``most_tokens_matched`` describes the most recent :meth:`match` call only.
    It is plain instance state with no locking, so :meth:`match` is not
    reentrant; share a matcher between threads through :meth:`trace`, which
    leaves the counter alone.
    """

    def __init__(
        self, pattern: str, tokens: Sequence[Token], options: CompileOptions | None = None
    ) -> None:
        self.pattern = pattern
        self.tokens = tuple(tokens)
        self.options = options or DEFAULT_OPTIONS
        self.most_tokens_matched = 0

    def __repr__(self) -> str:
        return f"Matcher({self.pattern!r}, tokens={len(self.tokens)})"

    def __len__(self) -> int:
        return len(self.tokens)

    def _consume(self, token: Token, candidate: str, pos: int) -> str | None:
        if isinstance(token, Alternation):
            first_only = self.options.alternation is AlternationPolicy.FIRST_OPTION
            return token.match_at(candidate, pos, first_option_only=first_only)
        return token.match_at(candidate, pos)

    def trace(self, candidate: str) -> MatchTrace:
        """Match ``candidate`` and return the full trace without touching any state."""
        pos = 0
        pairs: list[tuple[Token, str]] = []
        for token in self.tokens:
            text = self._consume(token, candidate, pos)
            if text is None:
                logger.debug(
                    "%r stopped at token %d (%r) offset %d",
                    self.pattern,
                    len(pairs),
                    token,
                    pos,
                )
                break
            pairs.append((token, text))
            pos += len(text)
        return MatchTrace(candidate, self.tokens, tuple(pairs), pos)

    def match(self, candidate: str) -> list[tuple[Token, str]]:
        """Return the ``(token, substring)`` pairs matched before the first failure.

        The list is always a prefix of :attr:`tokens`. Also records its
        length in :attr:`most_tokens_matched`.
        """
        self.most_tokens_matched = 0
        result = self.trace(candidate)
        self.most_tokens_matched = result.tokens_matched
        return list(result.pairs)

    def matches(self, candidate: str) -> bool:
        """True when every token matched; trailing candidate text is allowed."""
        return self.trace(candidate).complete

    def normalized(self) -> str:
        return render_pattern(self.tokens)


def match_pattern(text: str, pattern: str) -> bool:
    from .compiler import compile_cached

    return compile_cached(pattern).matches(text)


def match_all(texts: Sequence[str], pattern: str) -> list[bool]:
    from .compiler import compile_cached

    matcher = compile_cached(pattern)
    return [matcher.matches(text) for text in texts]
