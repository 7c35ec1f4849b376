"""tokenmatch: compile small patterns and trace how far candidates match them."""

from .engine.compiler import MalformedPattern, compile, compile_cached, tokenize
from .engine.explain import describe_tokens, explain_dict, explain_text
from .engine.matcher import Matcher, match_all, match_pattern
from .engine.models import AlternationPolicy, CompileOptions, MatchTrace, TrailingText
from .engine.tokens import Alternation, Literal, Token, Wildcard

__version__ = "1.0.0"

__all__ = [
    "Alternation",
    "AlternationPolicy",
    "CompileOptions",
    "Literal",
    "MalformedPattern",
    "MatchTrace",
    "Matcher",
    "Token",
    "TrailingText",
    "Wildcard",
    "compile",
    "compile_cached",
    "describe_tokens",
    "explain_dict",
    "explain_text",
    "match_all",
    "match_pattern",
    "tokenize",
]
