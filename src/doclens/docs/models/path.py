"""Qualified item paths.

A ``ModulePath`` locates a documented item in its crate's module hierarchy,
e.g. ``std::collections::HashMap::insert``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

PATH_SEPARATOR = "::"


@dataclass(frozen=True)
class ModulePath:
    """Immutable sequence of module/type path segments.

    Examples:
        >>> path = ModulePath.from_segments(["mycrate", "Foo", "bar"])
        >>> str(path)
        'mycrate::Foo::bar'
        >>> str(path.parent())
        'mycrate::Foo'
        >>> path.name
        'bar'
    """

    segments: tuple[str, ...]

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> ModulePath:
        return cls(tuple(segments))

    @classmethod
    def parse(cls, text: str) -> ModulePath:
        """Parse a ``::`` separated path string."""
        return cls(tuple(part for part in text.split(PATH_SEPARATOR) if part))

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ""

    def parent(self) -> ModulePath | None:
        """Return this path without its last segment, or None at the top level."""
        if len(self.segments) < 2:
            return None
        return ModulePath(self.segments[:-1])

    def ends_with(self, other: ModulePath) -> bool:
        if not other.segments or len(other.segments) > len(self.segments):
            return False
        return self.segments[-len(other.segments):] == other.segments

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)
