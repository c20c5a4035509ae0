"""Semantic version scanner, parser, precedence order and ranges."""

from __future__ import annotations

from semverlex.errors import (
    EmptyIdentifier,
    InvertedRange,
    LeadingZero,
    LexError,
    NumberOutOfRange,
    ParseError,
    RangeError,
    TrailingInput,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnexpectedToken,
)
from semverlex.parser import parse, parse_fields, parse_tokens
from semverlex.ranges import Range
from semverlex.scanner import scan
from semverlex.tokens import Token, TokenKind
from semverlex.version import (
    ONE_MAJOR,
    ONE_MINOR,
    ONE_PATCH,
    ZERO,
    AlphaNumeric,
    Numeric,
    Ordering,
    Version,
    compare,
)

__version__ = "0.1.0"


def is_valid(text: str) -> bool:
    """Return True if *text* is a complete, well-formed version."""
    try:
        parse(text)
    except (LexError, ParseError, TypeError):
        return False
    return True


__all__ = [
    "AlphaNumeric",
    "EmptyIdentifier",
    "InvertedRange",
    "LeadingZero",
    "LexError",
    "Numeric",
    "NumberOutOfRange",
    "ONE_MAJOR",
    "ONE_MINOR",
    "ONE_PATCH",
    "Ordering",
    "ParseError",
    "Range",
    "RangeError",
    "Token",
    "TokenKind",
    "TrailingInput",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "UnexpectedToken",
    "Version",
    "ZERO",
    "compare",
    "is_valid",
    "parse",
    "parse_fields",
    "parse_tokens",
    "scan",
]
