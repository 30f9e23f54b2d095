"""Tests for documentation entry models and qualified paths."""

import json

import pytest
from pydantic import ValidationError

from doclens.docs.models import (
    INNER_DATA_TYPES,
    TRAIT_ITEM_TYPES,
    DocumentationEntry,
    FunctionData,
    FunctionOrigin,
    ModuleData,
    ModulePath,
    TraitItemData,
    TraitType,
)


def _payload(**overrides) -> dict:
    payload = {
        "qualified_path": ["mycrate", "Foo", "bar"],
        "display_name": "bar",
        "crate_info": "mycrate 0.1.0",
        "visibility": "pub",
        "inner_data": {
            "kind": "function",
            "signature_text": "(x: i32) -> i32",
            "origin_kind": "method_from_impl",
        },
        "attributes": ["Adds one.", "", "# Examples"],
    }
    payload.update(overrides)
    return payload


class TestModulePath:
    def test_str_joins_with_double_colon(self):
        assert str(ModulePath.from_segments(["std", "collections", "HashMap"])) == "std::collections::HashMap"

    def test_parent_drops_last_segment(self):
        path = ModulePath.parse("mycrate::Foo::bar")
        assert path.parent() == ModulePath(("mycrate", "Foo"))
        assert path.name == "bar"

    def test_top_level_has_no_parent(self):
        assert ModulePath.parse("mycrate").parent() is None

    def test_ends_with(self):
        path = ModulePath.parse("std::collections::HashMap::insert")
        assert path.ends_with(ModulePath.parse("HashMap::insert"))
        assert path.ends_with(path)
        assert not path.ends_with(ModulePath.parse("Vec::insert"))
        assert not path.ends_with(ModulePath(()))

    def test_parse_ignores_empty_segments(self):
        assert ModulePath.parse("::Foo::bar").segments == ("Foo", "bar")


class TestDocumentationEntry:
    def test_from_bytes_builds_function_entry(self):
        entry = DocumentationEntry.from_bytes(json.dumps(_payload()).encode("utf-8"))

        assert isinstance(entry.inner_data, FunctionData)
        assert entry.inner_data.origin_kind is FunctionOrigin.METHOD_FROM_IMPL
        assert entry.qualified_path == ("mycrate", "Foo", "bar")
        assert str(entry.mod_path) == "mycrate::Foo::bar"

    def test_attributes_keep_source_order(self):
        entry = DocumentationEntry.model_validate(_payload())
        assert entry.attributes == ("Adds one.", "", "# Examples")

    def test_missing_visibility_renders_empty(self):
        entry = DocumentationEntry.model_validate(_payload(visibility=None))
        assert entry.visibility_text == ""

    def test_origin_defaults_to_free_function(self):
        entry = DocumentationEntry.model_validate(
            _payload(inner_data={"kind": "function", "signature_text": "()"})
        )
        assert entry.inner_data.origin_kind is FunctionOrigin.FREE_FUNCTION

    def test_nested_trait_item_kind(self):
        entry = DocumentationEntry.model_validate(
            _payload(inner_data={"kind": "trait_item", "item": {"kind": "type"}})
        )
        assert isinstance(entry.inner_data, TraitItemData)
        assert isinstance(entry.inner_data.item, TraitType)
        assert entry.inner_data.item.type_name is None

    def test_crate_root_module(self):
        entry = DocumentationEntry.model_validate(
            _payload(inner_data={"kind": "module", "is_crate_root": True})
        )
        assert entry.inner_data == ModuleData(is_crate_root=True)

    @pytest.mark.parametrize(
        "inner_data",
        [
            {"kind": "union"},
            {"signature_text": "()"},
            {"kind": "trait_item", "item": {"kind": "static"}},
            {"kind": "struct", "signature_text": "()"},
        ],
    )
    def test_rejects_invalid_inner_data(self, inner_data):
        with pytest.raises(ValidationError):
            DocumentationEntry.model_validate(_payload(inner_data=inner_data))

    def test_rejects_missing_inner_data(self):
        payload = _payload()
        del payload["inner_data"]
        with pytest.raises(ValidationError):
            DocumentationEntry.model_validate(payload)

    def test_rejects_empty_path(self):
        with pytest.raises(ValidationError):
            DocumentationEntry.model_validate(_payload(qualified_path=[]))

    def test_entries_are_immutable(self):
        entry = DocumentationEntry.model_validate(_payload())
        with pytest.raises(ValidationError):
            entry.display_name = "baz"


def test_variant_tables_list_every_union_member():
    assert len(INNER_DATA_TYPES) == 7
    assert len(TRAIT_ITEM_TYPES) == 4
    assert len(set(INNER_DATA_TYPES)) == len(INNER_DATA_TYPES)
