"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Content
    DIGITS = auto()  # [0-9]+
    IDENTIFIER = auto()  # run of [0-9A-Za-z-] that is not purely digits

    # Separators (single-character)
    DOT = auto()  # .
    HYPHEN = auto()  # - (only between patch and pre-release)
    PLUS = auto()  # +

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token with its 0-based offset and source text."""

    kind: TokenKind
    position: int
    lexeme: str

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.position + len(self.lexeme)


_DIGITS = frozenset("0123456789")
_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_alnum(ch: str) -> bool:
    """Return True if ch is an ASCII letter or digit."""
    return ch in _DIGITS or ch in _ALPHA


def is_ident_char(ch: str) -> bool:
    """Return True if ch may appear in a pre-release or build identifier."""
    return is_alnum(ch) or ch == "-"
