"""Markup directives, entry formatting and terminal rendering."""

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
from doclens.markup.formatter import EntryFormatter, format_attributes, format_entry, format_path
from doclens.markup.renderer import Renderer, render

__all__ = [
    "Block",
    "EntryFormatter",
    "Header",
    "LineBreak",
    "Markdown",
    "MarkupDirective",
    "MarkupDocument",
    "Renderer",
    "Rule",
    "Section",
    "format_attributes",
    "format_entry",
    "format_path",
    "render",
]
