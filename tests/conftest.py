"""Shared fixtures and fakes for doclens tests."""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pytest

from doclens.config import DoclensConfig
from doclens.docs.models import DocumentationEntry
from doclens.errors import EntryResolutionError


def make_entry(
    path: list[str],
    inner_data: dict[str, Any],
    *,
    crate_info: str = "mycrate 0.1.0",
    visibility: str | None = "pub",
    attributes: list[str] | None = None,
) -> DocumentationEntry:
    return DocumentationEntry.model_validate(
        {
            "qualified_path": path,
            "display_name": path[-1],
            "crate_info": crate_info,
            "visibility": visibility,
            "inner_data": inner_data,
            "attributes": attributes if attributes is not None else ["Does a thing."],
        }
    )


class FakeTerminal:
    """Terminal with a fixed width and plain, inspectable output."""

    def __init__(self, width: int | None = 80):
        self.width = width
        self.width_queries = 0
        self.markdown_calls: list[tuple[str, int]] = []

    def query_width(self) -> int:
        self.width_queries += 1
        return self.width if self.width is not None else 80

    def bold(self, text: str) -> str:
        return f"<b>{text}</b>"

    def render_markdown(self, text: str, width: int) -> str:
        self.markdown_calls.append((text, width))
        return f"[md:{width}]{text}"


class FakeStore:
    def __init__(self, locations: list[Any]):
        self.locations = locations
        self.queries: list[str] = []

    def lookup_name(self, query: str) -> list[Any]:
        self.queries.append(query)
        return list(self.locations)


class FakeDriver:
    """Resolves locations from a dict; missing keys fail resolution."""

    def __init__(self, entries: dict[Any, DocumentationEntry]):
        self.entries = entries
        self.requested: list[Any] = []

    def get_doc(self, location: Any) -> DocumentationEntry:
        self.requested.append(location)
        if location not in self.entries:
            raise EntryResolutionError(location, "entry file is missing or unreadable")
        return self.entries[location]


class RecordingChannel:
    def __init__(self):
        self.writes: list[str] = []
        self.closed = False

    def write(self, text: str) -> None:
        self.writes.append(text)

    def close(self) -> None:
        self.closed = True


class RecordingChannelFactory:
    def __init__(self, fail_on_write: bool = False):
        self.opened: list[RecordingChannel] = []
        self.fail_on_write = fail_on_write

    @contextmanager
    def __call__(self, config, stream=None):
        channel = RecordingChannel()
        if self.fail_on_write:
            def write(text: str) -> None:
                raise OSError("write failed")
            channel.write = write
        self.opened.append(channel)
        try:
            yield channel
        finally:
            channel.close()


@pytest.fixture
def config(tmp_path: Path) -> DoclensConfig:
    return DoclensConfig(
        home=tmp_path,
        max_results=10,
        use_pager=False,
        pager_command="less -R",
        log_level=30,
        show_backtrace=False,
    )


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


def write_store(home: Path, entries: dict[str, DocumentationEntry], crate: str = "mycrate-0.1.0") -> None:
    """Write an index and entry files for ``entries`` (file name -> entry) under ``home``."""
    records = []
    for file_name, entry in entries.items():
        entry_path = home / "entries" / crate / file_name
        entry_path.parent.mkdir(parents=True, exist_ok=True)
        entry_path.write_text(entry.model_dump_json(), encoding="utf-8")
        records.append(
            {
                "name": entry.display_name,
                "path": "::".join(entry.qualified_path),
                "crate": crate,
                "file": file_name,
            }
        )
    (home / "index.json").write_text(json.dumps({"version": 1, "entries": records}), encoding="utf-8")
