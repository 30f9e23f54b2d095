"""Documentation entry model.

This module defines the typed representation of one documented source item
(function, struct, constant, enum, trait, trait member, module or crate) as
stored in a doclens entry file. Entries are deserialized from JSON bytes
handed over by the ``Driver`` and are immutable once constructed.

The item-specific payload lives in ``inner_data``, a closed union of variant
models discriminated by their ``kind`` field. Trait members carry a second,
nested union discriminated the same way.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from doclens.docs.models.path import ModulePath


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class FunctionOrigin(str, Enum):
    """Where a function item was declared.

    - FREE_FUNCTION: module-level ``fn``
    - METHOD_FROM_IMPL: method declared in an inherent ``impl`` block
    - METHOD_FROM_TRAIT: method provided through a trait implementation
    """

    FREE_FUNCTION = "free_function"
    METHOD_FROM_IMPL = "method_from_impl"
    METHOD_FROM_TRAIT = "method_from_trait"


# =============================================================================
# Trait members
# =============================================================================


class TraitConst(_FrozenModel):
    kind: Literal["const"] = "const"
    type_name: str
    expr_text: str | None = None


class TraitMethod(_FrozenModel):
    kind: Literal["method"] = "method"
    signature_text: str


class TraitType(_FrozenModel):
    kind: Literal["type"] = "type"
    type_name: str | None = None


class TraitMacro(_FrozenModel):
    kind: Literal["macro"] = "macro"
    body_text: str


TraitItemKind = Annotated[
    Union[TraitConst, TraitMethod, TraitType, TraitMacro],
    Field(discriminator="kind"),
]


# =============================================================================
# Item variants
# =============================================================================


class FunctionData(_FrozenModel):
    kind: Literal["function"] = "function"
    signature_text: str
    origin_kind: FunctionOrigin = FunctionOrigin.FREE_FUNCTION


class StructData(_FrozenModel):
    kind: Literal["struct"] = "struct"


class ConstData(_FrozenModel):
    kind: Literal["const"] = "const"
    type_name: str
    expr_text: str


class EnumData(_FrozenModel):
    kind: Literal["enum"] = "enum"


class TraitData(_FrozenModel):
    kind: Literal["trait"] = "trait"


class TraitItemData(_FrozenModel):
    kind: Literal["trait_item"] = "trait_item"
    item: TraitItemKind


class ModuleData(_FrozenModel):
    kind: Literal["module"] = "module"
    is_crate_root: bool = False


InnerData = Annotated[
    Union[
        FunctionData,
        StructData,
        ConstData,
        EnumData,
        TraitData,
        TraitItemData,
        ModuleData,
    ],
    Field(discriminator="kind"),
]

# Concrete member types of the unions above, for exhaustive dispatch tables
INNER_DATA_TYPES: tuple[type[BaseModel], ...] = get_args(get_args(InnerData)[0])
TRAIT_ITEM_TYPES: tuple[type[BaseModel], ...] = get_args(get_args(TraitItemKind)[0])


class DocumentationEntry(_FrozenModel):
    """One documented source item.

    Attributes:
        qualified_path: Module/type path segments, crate name first
            (e.g. ``("mycrate", "Foo", "bar")``)
        display_name: Item name as written in source (e.g. ``"bar"``)
        crate_info: Crate label shown above the entry (e.g. ``"mycrate 0.1.0"``)
        visibility: Visibility qualifier such as ``"pub"``; None when absent
        inner_data: Exactly one item variant
        attributes: Doc-comment lines in source order

    Example:
        >>> entry = DocumentationEntry.from_bytes(
        ...     b'{"qualified_path": ["mycrate", "Foo"], "display_name": "Foo",'
        ...     b' "crate_info": "mycrate 0.1.0", "inner_data": {"kind": "struct"}}'
        ... )
        >>> str(entry.mod_path)
        'mycrate::Foo'
    """

    qualified_path: tuple[str, ...] = Field(min_length=1)
    display_name: str
    crate_info: str
    inner_data: InnerData
    visibility: str | None = None
    attributes: tuple[str, ...] = ()

    @classmethod
    def from_bytes(cls, data: bytes | str) -> DocumentationEntry:
        """Deserialize an entry from its JSON encoding.

        Raises:
            pydantic.ValidationError: If the payload is not a valid entry
        """
        return cls.model_validate_json(data)

    @property
    def mod_path(self) -> ModulePath:
        return ModulePath(self.qualified_path)

    @property
    def visibility_text(self) -> str:
        return self.visibility or ""
