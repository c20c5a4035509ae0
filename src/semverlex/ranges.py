"""Inclusive version ranges evaluated by precedence."""

from __future__ import annotations

from dataclasses import dataclass

from semverlex.errors import InvertedRange
from semverlex.version import Ordering, Version, compare


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive ``[min, max]`` bound over versions.

    Containment uses precedence only, so build metadata on either the
    bounds or the candidate is ignored.
    """

    min: Version
    max: Version

    def __post_init__(self) -> None:
        for name, bound in (("min", self.min), ("max", self.max)):
            if not isinstance(bound, Version):
                raise TypeError(f"range {name} must be a Version, got {type(bound).__name__}")
        if compare(self.min, self.max) is Ordering.GREATER:
            raise InvertedRange(str(self.min), str(self.max))

    @classmethod
    def parse(cls, min_text: str, max_text: str) -> Range:
        from semverlex.parser import parse

        return cls(parse(min_text), parse(max_text))

    def contains(self, version: Version) -> bool:
        return (
            compare(self.min, version) is not Ordering.GREATER
            and compare(version, self.max) is not Ordering.GREATER
        )

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            return False
        return self.contains(version)

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"
