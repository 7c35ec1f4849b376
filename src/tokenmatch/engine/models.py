"""Options and result models shared across the tokenmatch engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from .tokens import Token


class AlternationPolicy(str, enum.Enum):
    ANY = "any"
    FIRST_OPTION = "first_option"


class TrailingText(str, enum.Enum):
    EMIT = "emit"
    DROP = "drop"


def _coerce(enum_cls: type[enum.Enum], value: object, name: str) -> enum.Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Invalid {name}: {value!r}. Must be one of {valid}") from None


@dataclass(frozen=True)
class CompileOptions:
    """Compile-time switches between default and legacy behaviour.

    trailing_text: what to do with bare text still open at the end of the
        pattern. ``EMIT`` closes it into a final literal; ``DROP`` discards it
        (legacy).

    alternation: ``ANY`` tries each option in declared order and takes the
        first that matches; ``FIRST_OPTION`` gives up as soon as the leading
        option fails.

    Plain strings (``"drop"``, ``"first_option"``) are accepted and coerced.
    """

    trailing_text: TrailingText = TrailingText.EMIT
    alternation: AlternationPolicy = AlternationPolicy.ANY

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "trailing_text", _coerce(TrailingText, self.trailing_text, "trailing_text")
        )
        object.__setattr__(
            self, "alternation", _coerce(AlternationPolicy, self.alternation, "alternation")
        )


DEFAULT_OPTIONS = CompileOptions()


@dataclass(frozen=True)
class MatchTrace:
    """Outcome of one match attempt.

    ``pairs`` holds one ``(token, substring)`` entry per matched token, in
    token order, and stops at the first token that failed. ``end`` is the
    offset into ``candidate`` just past the last matched substring.
    """

    candidate: str
    tokens: tuple[Token, ...]
    pairs: tuple[tuple[Token, str], ...]
    end: int

    @property
    def tokens_matched(self) -> int:
        return len(self.pairs)

    @property
    def tokens_total(self) -> int:
        return len(self.tokens)

    @property
    def complete(self) -> bool:
        return len(self.pairs) == len(self.tokens)

    @property
    def remainder(self) -> str:
        return self.candidate[self.end :]

    @property
    def failed_token(self) -> Token | None:
        if self.complete:
            return None
        return self.tokens[len(self.pairs)]

    def to_json(self) -> dict[str, object]:
        failed = self.failed_token
        return {
            "candidate": self.candidate,
            "tokens_matched": self.tokens_matched,
            "tokens_total": self.tokens_total,
            "complete": self.complete,
            "end": self.end,
            "remainder": self.remainder,
            "matches": [
                {"token": token.to_pattern(), "kind": token.kind, "text": text}
                for token, text in self.pairs
            ],
            "failed_token": failed.to_pattern() if failed is not None else None,
        }
