"""Documentation entries and the read-only store they are loaded from."""

from doclens.docs.driver import Driver
from doclens.docs.models import DocumentationEntry, ModulePath
from doclens.docs.store import Store, StoreLocation

__all__ = [
    "Driver",
    "DocumentationEntry",
    "ModulePath",
    "Store",
    "StoreLocation",
]
