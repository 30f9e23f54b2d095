"""Read-only name index over generated documentation.

The index is a single JSON file (``index.json``) produced by the doclens
generator. It maps every documented item's display name and qualified path
to a ``StoreLocation`` that the ``Driver`` knows how to open.

Index layout::

    {
      "version": 1,
      "entries": [
        {"name": "bar", "path": "mycrate::Foo::bar",
         "crate": "mycrate-0.1.0", "file": "Foo/bar.json"}
      ]
    }

Lookup is plain equality on names and path suffixes in index order; ranking
belongs to the generator, which writes the index in preferred order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from doclens.docs.config import INDEX_FILE_NAME, INDEX_FORMAT_VERSION
from doclens.docs.models.path import PATH_SEPARATOR, ModulePath
from doclens.errors import IndexLoadError

logger = logging.getLogger("doclens.store")


@dataclass(frozen=True)
class StoreLocation:
    """Opaque handle to one entry file inside the store."""

    crate: str
    file: str

    def __str__(self) -> str:
        return f"{self.crate}/{self.file}"


class IndexRecord(BaseModel):
    name: str
    path: str
    crate: str
    file: str


class IndexFile(BaseModel):
    version: int = INDEX_FORMAT_VERSION
    entries: list[IndexRecord] = Field(default_factory=list)


class Store:
    """In-memory view of a loaded documentation index.

    Usage:
        >>> store = Store.load(Path("~/.doclens").expanduser())
        >>> [str(loc) for loc in store.lookup_name("HashMap")]
        ['std-1.0.0/collections/HashMap.json']
    """

    def __init__(self, records: list[IndexRecord]):
        self._records = list(records)

    @classmethod
    def load(cls, home: Path) -> Store:
        """Load ``index.json`` from a doclens home directory.

        Raises:
            IndexLoadError: If the index is missing, unreadable or malformed
        """
        index_path = home / INDEX_FILE_NAME
        try:
            raw = index_path.read_bytes()
        except FileNotFoundError as exc:
            raise IndexLoadError(
                f"no documentation index at {index_path}; generate documentation first"
            ) from exc
        except OSError as exc:
            raise IndexLoadError(f"cannot read documentation index {index_path}") from exc

        try:
            index = IndexFile.model_validate_json(raw)
        except ValidationError as exc:
            raise IndexLoadError(f"malformed documentation index {index_path}") from exc

        if index.version != INDEX_FORMAT_VERSION:
            raise IndexLoadError(
                f"unsupported index version {index.version} in {index_path} "
                f"(expected {INDEX_FORMAT_VERSION})"
            )

        logger.debug("Loaded %d index records from %s", len(index.entries), index_path)
        return cls(index.entries)

    def __len__(self) -> int:
        return len(self._records)

    def lookup_name(self, query: str) -> list[StoreLocation]:
        """Return locations whose name or path matches ``query``, in index order.

        A bare name (``"insert"``) matches items with that display name. A path
        query (``"HashMap::insert"``) matches items whose qualified path ends
        with the given segments.
        """
        query = " ".join(query.split())
        if not query:
            return []

        if PATH_SEPARATOR in query:
            wanted = ModulePath.parse(query)
            matches = [r for r in self._records if ModulePath.parse(r.path).ends_with(wanted)]
        else:
            matches = [r for r in self._records if r.name == query]

        logger.debug("Query %r matched %d index records", query, len(matches))
        return [StoreLocation(crate=r.crate, file=r.file) for r in matches]
