"""Version scanner: converts version text into a flat token stream."""

from __future__ import annotations

from enum import Enum, auto

from semverlex.errors import UnexpectedCharacter
from semverlex.tokens import Token, TokenKind, is_alnum, is_digit, is_ident_char


class _Section(Enum):
    CORE = auto()  # major.minor.patch
    PRE_RELEASE = auto()
    BUILD = auto()


class Scanner:
    """Tokenize one version string.

    Each instance owns its cursor, so a Scanner is used for a single call
    and then discarded.
    """

    def __init__(self, source: str, *, fields_only: bool = False) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []
        # A bare field list (builder input) starts past the core section
        self._section = _Section.PRE_RELEASE if fields_only else _Section.CORE

    def scan(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        while self._pos < len(self._source):
            self._scan_token()

        self._emit(TokenKind.EOF, self._pos)
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _emit(self, kind: TokenKind, start: int) -> Token:
        tok = Token(kind, start, self._source[start : self._pos])
        self._tokens.append(tok)
        return tok

    def _error(self) -> UnexpectedCharacter:
        ch = self._peek()
        return UnexpectedCharacter(
            f"unexpected character {ch!r} in version", self._pos, self._source
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._peek()
        start = self._pos

        if ch == ".":
            self._pos += 1
            self._emit(TokenKind.DOT, start)
            return

        if ch == "+":
            self._pos += 1
            self._emit(TokenKind.PLUS, start)
            self._section = _Section.BUILD
            return

        if ch == "-" and self._section is _Section.CORE:
            self._pos += 1
            self._emit(TokenKind.HYPHEN, start)
            self._section = _Section.PRE_RELEASE
            return

        if is_alnum(ch) or ch == "-":
            self._scan_run()
            return

        raise self._error()

    def _scan_run(self) -> None:
        """Consume a maximal run and emit it as DIGITS or IDENTIFIER.

        Hyphens only extend a run after the core section has ended.
        """
        start = self._pos
        in_core = self._section is _Section.CORE
        all_digits = True
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if in_core:
                if not is_alnum(ch):
                    break
            elif not is_ident_char(ch):
                break
            if not is_digit(ch):
                all_digits = False
            self._pos += 1

        kind = TokenKind.DIGITS if all_digits else TokenKind.IDENTIFIER
        self._emit(kind, start)


def scan(source: str, *, fields_only: bool = False) -> list[Token]:
    """Convenience function: scan version text and return the token list."""
    return Scanner(source, fields_only=fields_only).scan()
