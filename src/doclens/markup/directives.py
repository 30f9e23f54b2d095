"""Markup directives: the intermediate form between entries and text.

A ``MarkupDocument`` is an ordered, write-once sequence of directives. The
formatter builds one document per entry by concatenating per-phase documents;
the renderer turns each directive into one terminated line (or block) of
terminal text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union


@dataclass(frozen=True)
class Header:
    text: str


@dataclass(frozen=True)
class Section:
    text: str


@dataclass(frozen=True)
class Block:
    text: str


@dataclass(frozen=True)
class Markdown:
    text: str


@dataclass(frozen=True)
class Rule:
    width: int


@dataclass(frozen=True)
class LineBreak:
    pass


MarkupDirective = Union[Header, Section, Block, Markdown, Rule, LineBreak]

DIRECTIVE_TYPES: tuple[type, ...] = (Header, Section, Block, Markdown, Rule, LineBreak)


class MarkupDocument:
    """A formatted piece of documentation made up of markup directives.

    Documents never change after construction; ``+`` returns a new document
    holding the directives of both operands in order.
    """

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[MarkupDirective] = ()):
        self._parts: tuple[MarkupDirective, ...] = tuple(parts)

    @property
    def parts(self) -> tuple[MarkupDirective, ...]:
        return self._parts

    def __add__(self, other: MarkupDocument) -> MarkupDocument:
        if not isinstance(other, MarkupDocument):
            return NotImplemented
        return MarkupDocument(self._parts + other._parts)

    def __iter__(self) -> Iterator[MarkupDirective]:
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __getitem__(self, index: int) -> MarkupDirective:
        return self._parts[index]

    def __repr__(self) -> str:
        return f"MarkupDocument({list(self._parts)!r})"
