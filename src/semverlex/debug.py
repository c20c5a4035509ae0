"""--debug token and version dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from semverlex.tokens import Token
from semverlex.version import AlphaNumeric, Field, Numeric, Version


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token: offset, kind and lexeme (default: stderr)."""
    if file is None:
        file = sys.stderr
    for tok in tokens:
        file.write(f"{tok.position:>4} {tok.kind.name:<10} {tok.lexeme!r}\n")


def dump_version(version: Version, *, file: TextIO | None = None) -> None:
    """Print a human-readable breakdown of *version* to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    file.write(f"Version {version}\n")
    file.write(f"  major {version.major}\n")
    file.write(f"  minor {version.minor}\n")
    file.write(f"  patch {version.patch}\n")
    _dump_fields("pre_release", version.pre_release, file)
    _dump_fields("build", version.build, file)


def _dump_fields(name: str, fields: tuple[Field, ...] | None, f: TextIO) -> None:
    if fields is None:
        f.write(f"  {name} -\n")
        return
    f.write(f"  {name}\n")
    for field in fields:
        f.write(f"    {_describe(field)}\n")


def _describe(field: Field) -> str:
    if isinstance(field, Numeric):
        return f"Numeric({field.value})"
    if isinstance(field, AlphaNumeric):
        return f"AlphaNumeric({field.text!r})"
    raise TypeError(f"unknown field type {type(field).__name__}")
