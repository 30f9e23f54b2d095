"""Documentation formatters for terminal display.

This module converts a ``DocumentationEntry`` into a ``MarkupDocument``. A
document is assembled by running a fixed pipeline of phases, each producing
its own small document:

- header: crate label and "<Kind> <path>" title
- inner info: where a method or trait member comes from
- signature: a one-line item signature inside horizontal rules
- body: the doc comment, as markdown
- related items: reserved, currently empty

Every item variant has an entry in the dispatch tables below. Formatting is
total: it never raises for a valid entry.
"""

from __future__ import annotations

from typing import Any, Callable

from doclens.docs.models import (
    ConstData,
    DocumentationEntry,
    EnumData,
    FunctionData,
    FunctionOrigin,
    ModuleData,
    ModulePath,
    StructData,
    TraitConst,
    TraitData,
    TraitItemData,
    TraitMacro,
    TraitMethod,
    TraitType,
)
from doclens.markup.directives import Block, Header, LineBreak, Markdown, MarkupDocument, Rule

SIGNATURE_RULE_WIDTH = 10

# Item kind titles shown in the header line
KIND_LABELS: dict[type, Callable[[Any], str]] = {
    FunctionData: lambda data: "Function",
    StructData: lambda data: "Struct",
    ConstData: lambda data: "Constant",
    EnumData: lambda data: "Enum",
    TraitData: lambda data: "Trait",
    TraitItemData: lambda data: "Trait Item",
    ModuleData: lambda data: "Crate" if data.is_crate_root else "Module",
}


def _trait_const_signature(entry: DocumentationEntry, item: TraitConst) -> str:
    return f"const {entry.display_name}: {item.type_name} = {item.expr_text or ''}"


def _trait_type_signature(entry: DocumentationEntry, item: TraitType) -> str:
    return f"type {item.type_name or ''}"


TRAIT_ITEM_SIGNATURES: dict[type, Callable[[DocumentationEntry, Any], str]] = {
    TraitConst: _trait_const_signature,
    TraitMethod: lambda entry, item: f"fn {entry.display_name} {item.signature_text}",
    TraitType: _trait_type_signature,
    TraitMacro: lambda entry, item: f"macro {entry.display_name} {item.body_text}",
}


def _trait_item_signature(entry: DocumentationEntry, data: TraitItemData) -> str:
    return TRAIT_ITEM_SIGNATURES[type(data.item)](entry, data.item)


SIGNATURES: dict[type, Callable[[DocumentationEntry, Any], str]] = {
    ModuleData: lambda entry, data: f"mod {entry.mod_path}",
    FunctionData: lambda entry, data: f"fn {entry.display_name} {data.signature_text}",
    EnumData: lambda entry, data: f"enum {entry.display_name}",
    StructData: lambda entry, data: f"struct {entry.display_name} {{ /* fields omitted */ }}",
    ConstData: lambda entry, data: f"const {entry.display_name}: {data.type_name} = {data.expr_text}",
    TraitData: lambda entry, data: f"trait {entry.display_name} {{ /* fields omitted */ }}",
    TraitItemData: _trait_item_signature,
}


class EntryFormatter:
    """Formats documentation entries as markup documents.

    Each phase is a static method taking the entry and returning the
    directives for its part of the document. ``format`` concatenates them
    in ``PHASES`` order.
    """

    @staticmethod
    def header(entry: DocumentationEntry) -> MarkupDocument:
        label = KIND_LABELS[type(entry.inner_data)](entry.inner_data)
        return MarkupDocument([
            Block(f"({entry.crate_info})"),
            Header(f"{label} {entry.mod_path}"),
        ])

    @staticmethod
    def inner_info(entry: DocumentationEntry) -> MarkupDocument:
        """Attribute methods to their impl type and trait members to their trait."""
        data = entry.inner_data
        parent = entry.mod_path.parent()

        if parent is not None:
            if isinstance(data, FunctionData) and data.origin_kind is FunctionOrigin.METHOD_FROM_IMPL:
                return MarkupDocument([Header(f"Impl on type {parent}")])
            if isinstance(data, TraitItemData):
                return MarkupDocument([Header(f"From trait {parent}")])

        return MarkupDocument([LineBreak()])

    @staticmethod
    def signature(entry: DocumentationEntry) -> MarkupDocument:
        data = entry.inner_data

        # Crates have no signature line
        if isinstance(data, ModuleData) and data.is_crate_root:
            return MarkupDocument([Rule(SIGNATURE_RULE_WIDTH), LineBreak()])

        signature = SIGNATURES[type(data)](entry, data)
        return MarkupDocument([
            Rule(SIGNATURE_RULE_WIDTH),
            LineBreak(),
            Block(f"  {entry.visibility_text} {signature}"),
            LineBreak(),
            Rule(SIGNATURE_RULE_WIDTH),
            LineBreak(),
        ])

    @staticmethod
    def body(entry: DocumentationEntry) -> MarkupDocument:
        return format_attributes(entry.attributes)

    @staticmethod
    def related_items(entry: DocumentationEntry) -> MarkupDocument:
        return MarkupDocument()

    @staticmethod
    def format(entry: DocumentationEntry) -> MarkupDocument:
        document = MarkupDocument()
        for phase in PHASES:
            document = document + phase(entry)
        return document


PHASES: tuple[Callable[[DocumentationEntry], MarkupDocument], ...] = (
    EntryFormatter.header,
    EntryFormatter.inner_info,
    EntryFormatter.signature,
    EntryFormatter.body,
    EntryFormatter.related_items,
)


def format_entry(entry: DocumentationEntry) -> MarkupDocument:
    """Format one documentation entry for display."""
    return EntryFormatter.format(entry)


def format_path(path: ModulePath) -> MarkupDocument:
    return MarkupDocument([Header(str(path))])


def format_attributes(lines: tuple[str, ...] | list[str]) -> MarkupDocument:
    """Join doc-comment lines into a single markdown directive."""
    return MarkupDocument([Markdown("\n".join(lines))])
