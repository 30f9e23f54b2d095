"""Text rendering of markup documents."""

from __future__ import annotations

from typing import Callable

from doclens.markup.directives import (
    Block,
    Header,
    LineBreak,
    Markdown,
    MarkupDirective,
    MarkupDocument,
    Rule,
    Section,
)
from doclens.markup.terminal import RichTerminal, Terminal


class Renderer:
    """Renders markup documents to terminal text.

    The terminal width is looked up the first time a markdown directive is
    rendered and reused for the lifetime of the renderer. Create one renderer
    per invocation.
    """

    def __init__(self, terminal: Terminal | None = None, width: int | None = None):
        self.terminal = terminal or RichTerminal()
        self._width = width
        self._handlers: dict[type, Callable[..., str]] = {
            Header: lambda d: self.terminal.bold(f"==== {d.text}"),
            Section: lambda d: self.terminal.bold(f"== {d.text}"),
            Block: lambda d: d.text,
            Markdown: lambda d: self.terminal.render_markdown(d.text, self.width),
            Rule: lambda d: "-" * d.width,
            LineBreak: lambda d: "",
        }

    @property
    def width(self) -> int:
        if self._width is None:
            self._width = self.terminal.query_width()
        return self._width

    def render_directive(self, directive: MarkupDirective) -> str:
        return self._handlers[type(directive)](directive)

    def render(self, document: MarkupDocument) -> str:
        """Render every directive, each followed by a line break."""
        return "".join(f"{self.render_directive(part)}\n" for part in document)


def render(document: MarkupDocument) -> str:
    """Render a document with a fresh renderer for the current terminal."""
    return Renderer().render(document)
