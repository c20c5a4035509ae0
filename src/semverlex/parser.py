"""Version parser: converts a token stream into a Version."""

from __future__ import annotations

from semverlex.errors import (
    EmptyIdentifier,
    LeadingZero,
    NumberOutOfRange,
    ParseError,
    TrailingInput,
    UnexpectedEnd,
    UnexpectedToken,
)
from semverlex.scanner import scan
from semverlex.tokens import Token, TokenKind
from semverlex.version import (
    U32_MAX,
    U64_MAX,
    AlphaNumeric,
    Field,
    Numeric,
    Version,
    field_from_text,
)


class Parser:
    """Recursive descent parser for version token streams."""

    def __init__(self, tokens: list[Token], source: str) -> None:
        self._tokens = tokens
        self._source = source
        self._pos = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return self._tokens[-1]  # EOF

    def _at(self, *kinds: TokenKind) -> bool:
        return self._peek().kind in kinds

    def _advance(self) -> Token:
        tok = self._peek()
        if tok.kind != TokenKind.EOF:
            self._pos += 1
        return tok

    def _prev(self) -> Token | None:
        if self._pos > 0:
            return self._tokens[self._pos - 1]
        return None

    def _error(self, cls: type[ParseError], message: str, tok: Token) -> ParseError:
        return cls(message, tok.position, self._source)

    # ------------------------------------------------------------------
    # Version level
    # ------------------------------------------------------------------

    def parse(self) -> Version:
        major = self._parse_core_field("major")
        self._expect_dot("major", "minor")
        minor = self._parse_core_field("minor")
        self._expect_dot("minor", "patch")
        patch = self._parse_core_field("patch")

        pre_release: tuple[Field, ...] | None = None
        build: tuple[Field, ...] | None = None

        if self._at(TokenKind.HYPHEN):
            self._advance()
            pre_release = self._parse_fields("pre-release", build=False)

        if self._at(TokenKind.PLUS):
            self._advance()
            build = self._parse_fields("build", build=True)

        self._expect_end()
        return Version(major, minor, patch, pre_release, build)

    def parse_fields(self, *, build: bool) -> tuple[Field, ...]:
        """Parse a bare dot-separated field list that must fill the input."""
        fields = self._parse_fields("build" if build else "pre-release", build=build)
        self._expect_end()
        return fields

    def _expect_end(self) -> None:
        tok = self._peek()
        if tok.kind != TokenKind.EOF:
            raise self._error(TrailingInput, f"unexpected {tok.lexeme!r} after version", tok)

    # ------------------------------------------------------------------
    # major.minor.patch
    # ------------------------------------------------------------------

    def _parse_core_field(self, name: str) -> int:
        tok = self._peek()

        if tok.kind == TokenKind.EOF:
            raise self._error(UnexpectedEnd, f"unexpected end of input, expected {name}", tok)

        if tok.kind == TokenKind.DOT:
            prev = self._prev()
            if prev is not None and prev.kind == TokenKind.DOT:
                raise self._error(EmptyIdentifier, f"empty {name} field", tok)

        if tok.kind != TokenKind.DIGITS:
            raise self._error(
                UnexpectedToken, f"expected {name} number, found {tok.lexeme!r}", tok
            )

        text = tok.lexeme
        if len(text) > 1 and text[0] == "0":
            raise self._error(LeadingZero, f"{name} must not have a leading zero", tok)

        if len(text) > len(str(U32_MAX)) or int(text) > U32_MAX:
            raise self._error(NumberOutOfRange, f"{name} exceeds {U32_MAX}", tok)

        self._advance()
        return int(text)

    def _expect_dot(self, after: str, before: str) -> None:
        tok = self._peek()
        if tok.kind == TokenKind.DOT:
            self._advance()
            return
        if tok.kind == TokenKind.EOF:
            raise self._error(
                UnexpectedEnd, f"unexpected end of input, expected '.' and {before}", tok
            )
        raise self._error(
            UnexpectedToken, f"expected '.' after {after}, found {tok.lexeme!r}", tok
        )

    # ------------------------------------------------------------------
    # Pre-release and build fields
    # ------------------------------------------------------------------

    def _parse_fields(self, section: str, *, build: bool) -> tuple[Field, ...]:
        fields: list[Field] = []
        while True:
            tok = self._peek()
            if tok.kind == TokenKind.DIGITS:
                fields.append(self._digits_field(tok, build=build))
            elif tok.kind == TokenKind.IDENTIFIER:
                fields.append(AlphaNumeric(tok.lexeme))
            else:
                # Separator or end of input where a field should be
                raise self._error(EmptyIdentifier, f"empty {section} identifier", tok)
            self._advance()

            if not self._at(TokenKind.DOT):
                return tuple(fields)
            self._advance()

    def _digits_field(self, tok: Token, *, build: bool) -> Field:
        text = tok.lexeme
        if build:
            return field_from_text(text)
        if len(text) > 1 and text[0] == "0":
            return AlphaNumeric(text)
        if len(text) > len(str(U64_MAX)) or int(text) > U64_MAX:
            raise self._error(
                NumberOutOfRange, f"numeric pre-release identifier exceeds {U64_MAX}", tok
            )
        return Numeric(int(text))


def parse_tokens(tokens: list[Token], source: str) -> Version:
    """Parse an already-scanned token list into a Version."""
    return Parser(tokens, source).parse()


def parse(source: str) -> Version:
    """Convenience function: scan and parse version text."""
    if not isinstance(source, str):
        raise TypeError(f"version must be a str, got {type(source).__name__}")
    return parse_tokens(scan(source), source)


def parse_fields(source: str, *, build: bool) -> tuple[Field, ...]:
    """Validate and parse a dot-separated pre-release or build list."""
    if not isinstance(source, str):
        raise TypeError(f"fields must be a str, got {type(source).__name__}")
    return Parser(scan(source, fields_only=True), source).parse_fields(build=build)
