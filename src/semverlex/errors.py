"""Error types with formatted source context."""

from __future__ import annotations


class _SourceError(Exception):
    """Shared formatting for errors that point at one character of the input."""

    def __init__(self, message: str, position: int, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, label: str = "input") -> str:
        col = self.position + 1

        # Underline one character, or the slot just past the end
        pad = " " * self.position
        gutter = "  |"

        return (
            f"error: {self.message}\n"
            f"  --> {label}:{col}\n"
            f"{gutter}\n"
            f"{gutter} {self.source}\n"
            f"{gutter} {pad}^"
        )


class LexError(_SourceError):
    """Raised on the first character the scanner cannot classify."""


class UnexpectedCharacter(LexError):
    """A character outside [0-9A-Za-z.+-] was found."""


class ParseError(_SourceError):
    """Raised on the first grammar violation; the parser never recovers."""


class LeadingZero(ParseError):
    """A major, minor or patch field has a leading zero."""


class EmptyIdentifier(ParseError):
    """A separator is followed by another separator or by end of input."""


class TrailingInput(ParseError):
    """Tokens remain after a complete version."""


class UnexpectedEnd(ParseError):
    """Input ended before major, minor and patch were all read."""


class UnexpectedToken(ParseError):
    """A token cannot start the construct expected at this position."""


class NumberOutOfRange(ParseError):
    """A numeric field does not fit its unsigned width."""


class RangeError(Exception):
    """Raised when a version range cannot be constructed."""


class InvertedRange(RangeError):
    """The lower bound has greater precedence than the upper bound."""

    def __init__(self, min_text: str, max_text: str) -> None:
        self.min_text = min_text
        self.max_text = max_text
        super().__init__(f"inverted range: {min_text} is greater than {max_text}")
