"""Error types and error report rendering for doclens."""

from __future__ import annotations

import traceback
from typing import Any


class DoclensError(Exception):
    """Base class for errors that end a doclens invocation."""


class IndexLoadError(DoclensError):
    """The documentation index could not be read."""


class EntryResolutionError(DoclensError):
    """A store location could not be materialized into an entry."""

    def __init__(self, location: Any, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"could not load documentation for {location}: {reason}")


class OutputChannelError(DoclensError):
    """The pager could not be started or written to."""


def _summarize(exc: BaseException) -> str:
    text = str(exc).strip()
    if not text:
        return type(exc).__name__
    return text.splitlines()[0]


def iter_causes(exc: BaseException):
    """Yield the exceptions chained below ``exc``, nearest first."""
    seen = {id(exc)}
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def format_error_report(exc: BaseException, *, backtrace: bool = False) -> list[str]:
    """Build the lines reported on stderr for a fatal error.

    The first line is the error itself, followed by one line per chained
    cause. When ``backtrace`` is set, the formatted traceback is appended.
    """
    lines = [f"error: {_summarize(exc)}"]
    for cause in iter_causes(exc):
        lines.append(f"caused by: {_summarize(cause)}")
    if backtrace:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        lines.append(f"backtrace:\n{trace.rstrip()}")
    return lines
