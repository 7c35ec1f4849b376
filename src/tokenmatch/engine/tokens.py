"""Token types produced by the pattern compiler."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

WILDCARD = "."
GROUP_OPEN = "("
GROUP_CLOSE = ")"
SEPARATOR = "|"


@dataclass(frozen=True)
class Literal:
    """An exact run of characters that must appear verbatim."""

    text: str
    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    kind = "literal"

    def match_at(self, candidate: str, pos: int) -> str | None:
        if candidate.startswith(self.text, pos):
            return candidate[pos : pos + len(self.text)]
        return None

    def to_pattern(self) -> str:
        return self.text


@dataclass(frozen=True)
class Alternation:
    """A set of literal options; the first option matching at the cursor wins.

    ``options`` keeps declaration order. With ``first_option_only`` only the
    leading option is ever tried (legacy behaviour).
    """

    options: tuple[str, ...]
    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    kind = "alternation"

    def __post_init__(self) -> None:
        # accept lists from callers, but keep the token hashable
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    def match_at(self, candidate: str, pos: int, first_option_only: bool = False) -> str | None:
        options = self.options[:1] if first_option_only else self.options
        for option in options:
            if candidate.startswith(option, pos):
                return candidate[pos : pos + len(option)]
        return None

    def to_pattern(self) -> str:
        return GROUP_OPEN + SEPARATOR.join(self.options) + GROUP_CLOSE


@dataclass(frozen=True)
class Wildcard:
    """Any single character."""

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    kind = "wildcard"

    def match_at(self, candidate: str, pos: int) -> str | None:
        if pos >= len(candidate):
            return None
        return candidate[pos]

    def to_pattern(self) -> str:
        return WILDCARD


Token = Union[Literal, Alternation, Wildcard]


def render_pattern(tokens: tuple[Token, ...] | list[Token]) -> str:
    """Rebuild pattern text from ``tokens``.

    The result compiles back to an equal token sequence as long as no
    literal is immediately followed by another literal.
    """
    return "".join(token.to_pattern() for token in tokens)
