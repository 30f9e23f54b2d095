"""Query presentation: look up, format, render and page documentation.

``PresentationDriver.run`` handles one query end to end:

1. ask the store for candidate locations (at most ``max_results``)
2. resolve each candidate into an entry through the driver
3. format and render every resolved entry, in store order
4. write the rendered text to the output channel

Entries that fail to resolve are skipped with a warning instead of aborting
the query, so one corrupt record does not hide the rest of the results.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import IO, Any, Callable, ContextManager, Iterable, Protocol

from doclens.config import DoclensConfig, get_config
from doclens.docs.models import DocumentationEntry
from doclens.errors import EntryResolutionError
from doclens.markup.formatter import format_entry
from doclens.markup.renderer import Renderer
from doclens.markup.terminal import Terminal
from doclens.output import OutputChannel, open_output_channel

logger = logging.getLogger("doclens.presentation")


class DocumentStore(Protocol):
    def lookup_name(self, query: str) -> Iterable[Any]: ...


class DocumentDriver(Protocol):
    def get_doc(self, location: Any) -> DocumentationEntry: ...


ChannelFactory = Callable[[DoclensConfig, "IO[str] | None"], ContextManager[OutputChannel]]


@dataclass
class SkippedEntry:
    location: Any
    error: EntryResolutionError


@dataclass
class QueryOutcome:
    """Summary of one presented query."""

    query: str
    candidates: int = 0
    rendered: list[str] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)


class PresentationDriver:
    """Runs queries against a store and presents the results."""

    def __init__(
        self,
        store: DocumentStore,
        driver: DocumentDriver,
        *,
        config: DoclensConfig | None = None,
        terminal: Terminal | None = None,
        channel_factory: ChannelFactory = open_output_channel,
        stdout: IO[str] | None = None,
    ):
        self.store = store
        self.driver = driver
        self.config = config or get_config()
        self.terminal = terminal
        self.channel_factory = channel_factory
        self.stdout = stdout

    def _echo(self, message: str) -> None:
        print(message, file=self.stdout or sys.stdout)

    def _resolve(self, location: Any, outcome: QueryOutcome) -> DocumentationEntry | None:
        try:
            return self.driver.get_doc(location)
        except EntryResolutionError as exc:
            logger.warning("Skipping %s: %s", location, exc.reason)
            outcome.skipped.append(SkippedEntry(location=location, error=exc))
            return None

    def run(self, query: str) -> QueryOutcome:
        """Present the documentation matching ``query``."""
        outcome = QueryOutcome(query=query)
        candidates = list(islice(self.store.lookup_name(query), self.config.max_results))
        outcome.candidates = len(candidates)

        if not candidates:
            self._echo(f'No results for "{query}".')
            return outcome

        renderer = Renderer(terminal=self.terminal)
        for location in candidates:
            entry = self._resolve(location, outcome)
            if entry is None:
                continue
            outcome.rendered.append(renderer.render(format_entry(entry)))

        if not outcome.rendered:
            self._echo(f'No readable results for "{query}".')
            return outcome

        if outcome.skipped:
            logger.warning(
                "%d of %d results for %r could not be loaded",
                len(outcome.skipped), len(candidates), query,
            )

        with self.channel_factory(self.config, self.stdout) as channel:
            for text in outcome.rendered:
                channel.write(f"{text}\n")

        return outcome
