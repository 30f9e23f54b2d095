"""Typed documentation entry models."""

from doclens.docs.models.entry import (
    INNER_DATA_TYPES,
    TRAIT_ITEM_TYPES,
    ConstData,
    DocumentationEntry,
    EnumData,
    FunctionData,
    FunctionOrigin,
    InnerData,
    ModuleData,
    StructData,
    TraitConst,
    TraitData,
    TraitItemData,
    TraitMacro,
    TraitMethod,
    TraitType,
)
from doclens.docs.models.path import ModulePath

__all__ = [
    "INNER_DATA_TYPES",
    "TRAIT_ITEM_TYPES",
    "ConstData",
    "DocumentationEntry",
    "EnumData",
    "FunctionData",
    "FunctionOrigin",
    "InnerData",
    "ModuleData",
    "ModulePath",
    "StructData",
    "TraitConst",
    "TraitData",
    "TraitItemData",
    "TraitMacro",
    "TraitMethod",
    "TraitType",
]
