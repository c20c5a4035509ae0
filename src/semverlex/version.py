"""Version values and the precedence order over them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

from semverlex.tokens import is_digit, is_ident_char

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, slots=True)
class Numeric:
    """Numeric pre-release or build field, written without leading zeros."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"numeric field must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"numeric field out of range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphaNumeric:
    """Textual pre-release or build field, kept verbatim."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("alphanumeric field must not be empty")
        if not all(is_ident_char(ch) for ch in self.text):
            raise ValueError(f"invalid character in field {self.text!r}")
        if _reads_as_numeric(self.text):
            raise ValueError(f"field {self.text!r} is numeric, use Numeric")

    def __str__(self) -> str:
        return self.text


Field = Numeric | AlphaNumeric


def _no_leading_zero_digits(text: str) -> bool:
    return (
        bool(text)
        and all(is_digit(ch) for ch in text)
        and (text == "0" or text[0] != "0")
    )


def _reads_as_numeric(text: str) -> bool:
    """True when *text* would parse back as a Numeric field."""
    return (
        _no_leading_zero_digits(text)
        and len(text) <= len(str(U64_MAX))
        and int(text) <= U64_MAX
    )


def field_from_text(text: str) -> Field:
    """Classify already-validated field text.

    Digit-only text without a leading zero that fits 64 bits is Numeric,
    everything else is AlphaNumeric.
    """
    if _reads_as_numeric(text):
        return Numeric(int(text))
    return AlphaNumeric(text)


def compare_fields(a: Field, b: Field) -> Ordering:
    """Compare two pre-release fields at the same position."""
    if isinstance(a, Numeric):
        if isinstance(b, Numeric):
            return _cmp(a.value, b.value)
        if isinstance(b, AlphaNumeric):
            return Ordering.LESS
    elif isinstance(a, AlphaNumeric):
        if isinstance(b, AlphaNumeric):
            # ASCII-only text, so code point order is byte order
            return _cmp(a.text, b.text)
        if isinstance(b, Numeric):
            return Ordering.GREATER
    raise TypeError(f"cannot compare fields {a!r} and {b!r}")


def _cmp(a, b) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _check_core(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{name} out of range: {value}")


def _check_fields(
    name: str, fields: tuple[Field, ...] | None, *, strict_digits: bool = False
) -> None:
    if fields is None:
        return
    if not isinstance(fields, tuple):
        raise TypeError(f"{name} must be a tuple of fields or None")
    if not fields:
        raise ValueError(f"{name} must contain at least one field")
    for f in fields:
        if not isinstance(f, (Numeric, AlphaNumeric)):
            raise TypeError(f"{name} field must be Numeric or AlphaNumeric, got {f!r}")
        # Oversized digit runs are only legal as build text
        if strict_digits and isinstance(f, AlphaNumeric) and _no_leading_zero_digits(f.text):
            raise ValueError(f"{name} field {f.text!r} exceeds {U64_MAX}")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A semantic version.

    Equality, ordering and hashing follow precedence: build metadata is
    carried for display but never compared.
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[Field, ...] | None = None
    build: tuple[Field, ...] | None = None

    def __post_init__(self) -> None:
        _check_core("major", self.major)
        _check_core("minor", self.minor)
        _check_core("patch", self.patch)
        _check_fields("pre_release", self.pre_release, strict_digits=True)
        _check_fields("build", self.build)

    @classmethod
    def default(cls) -> Version:
        return ONE_MINOR

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            text += "-" + ".".join(str(f) for f in self.pre_release)
        if self.build is not None:
            text += "+" + ".".join(str(f) for f in self.build)
        return text

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    @property
    def is_prerelease(self) -> bool:
        return self.pre_release is not None

    @property
    def base(self) -> Version:
        """Copy with pre-release and build stripped."""
        return Version(self.major, self.minor, self.patch)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_pre_release(self, text: str | None) -> Version:
        """Return a copy with pre-release fields parsed from *text*.

        The text goes through the same scanner and parser rules as a full
        version string, so ``"alpha..1"`` raises EmptyIdentifier.
        """
        from semverlex.parser import parse_fields

        fields = None if text is None else parse_fields(text, build=False)
        return replace(self, pre_release=fields)

    def with_build(self, text: str | None) -> Version:
        """Return a copy with build fields parsed from *text*."""
        from semverlex.parser import parse_fields

        fields = None if text is None else parse_fields(text, build=True)
        return replace(self, build=fields)

    # ------------------------------------------------------------------
    # Increments
    # ------------------------------------------------------------------

    def inc_major(self) -> Version:
        return Version(_bump(self.major, "major"), 0, 0)

    def inc_minor(self) -> Version:
        return Version(self.major, _bump(self.minor, "minor"), 0)

    def inc_patch(self) -> Version:
        return Version(self.major, self.minor, _bump(self.patch, "patch"))

    def merge_components(self, other: Version) -> Version:
        """Sum major, minor and patch component-wise.

        This is not a semantic-versioning operation; pre-release and build
        are dropped from the result.
        """
        total = (
            self.major + other.major,
            self.minor + other.minor,
            self.patch + other.patch,
        )
        if max(total) > U32_MAX:
            raise OverflowError(f"component-wise merge of {self} and {other} overflows")
        return Version(*total)

    # ------------------------------------------------------------------
    # Precedence
    # ------------------------------------------------------------------

    def compare(self, other: Version) -> Ordering:
        return compare(self, other)

    def sort_key(self) -> tuple:
        """Key for sorted(); orders exactly like compare()."""
        if self.pre_release is None:
            pre: tuple = ((1,),)
        else:
            pre = tuple(
                (0, f.value, "") if isinstance(f, Numeric) else (1, 0, f.text)
                for f in self.pre_release
            )
            pre = ((0,),) + pre
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_release))


def _bump(value: int, name: str) -> int:
    if value >= U32_MAX:
        raise OverflowError(f"cannot increment {name} past {U32_MAX}")
    return value + 1


def compare(a: Version, b: Version) -> Ordering:
    """Compare two versions by precedence, ignoring build metadata."""
    for x, y in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if x != y:
            return _cmp(x, y)

    if a.pre_release is None:
        return Ordering.EQUAL if b.pre_release is None else Ordering.GREATER
    if b.pre_release is None:
        return Ordering.LESS

    for fa, fb in zip(a.pre_release, b.pre_release):
        result = compare_fields(fa, fb)
        if result is not Ordering.EQUAL:
            return result

    # Common prefix equal: the shorter list has lower precedence
    return _cmp(len(a.pre_release), len(b.pre_release))


ZERO = Version(0, 0, 0)
ONE_MAJOR = Version(1, 0, 0)
ONE_MINOR = Version(0, 1, 0)
ONE_PATCH = Version(0, 0, 1)
