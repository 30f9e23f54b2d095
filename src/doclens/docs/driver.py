"""Entry resolution: turn a store location into a documentation entry."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from doclens.docs.models.entry import DocumentationEntry
from doclens.docs.store import StoreLocation
from doclens.errors import EntryResolutionError

logger = logging.getLogger("doclens.driver")


class Driver:
    """Loads entry files from the store's entries directory.

    Entries are read and deserialized on demand, one per call, so that a
    query only pays for the results it actually shows.
    """

    def __init__(self, root: Path):
        self.root = root

    def entry_path(self, location: StoreLocation) -> Path:
        """Return the file for ``location``, which must stay inside ``root``.

        Raises:
            EntryResolutionError: If the location points outside the entries directory
        """
        root = self.root.resolve()
        path = (root / location.crate / location.file).resolve()
        if path == root or not path.is_relative_to(root):
            raise EntryResolutionError(location, "entry path is outside the documentation store")
        return path

    def get_doc(self, location: StoreLocation) -> DocumentationEntry:
        """Read and deserialize the entry at ``location``.

        Raises:
            EntryResolutionError: If the file lies outside the store, is
                missing or unreadable, or does not hold a valid entry. The
                underlying error is chained.
        """
        path = self.entry_path(location)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise EntryResolutionError(location, "entry file is missing or unreadable") from exc

        try:
            entry = DocumentationEntry.from_bytes(raw)
        except ValidationError as exc:
            raise EntryResolutionError(
                location, f"invalid entry data ({exc.error_count()} errors)"
            ) from exc

        logger.debug("Resolved %s to %s", location, entry.mod_path)
        return entry
