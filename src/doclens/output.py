"""Output channels for rendered documentation.

Rendered text goes either through an external pager (interactive use) or
straight to stdout (pipes, redirects, ``DOCLENS_PAGER=0``). The channel is a
scoped resource: ``open_output_channel`` starts the pager on entry and always
closes it on exit, also when writing fails.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from contextlib import contextmanager
from typing import IO, Iterator, Protocol

from doclens.config import DoclensConfig
from doclens.errors import OutputChannelError

logger = logging.getLogger("doclens.output")


class OutputChannel(Protocol):
    def write(self, text: str) -> None: ...

    def close(self) -> None: ...


class PassthroughChannel:
    """Writes directly to a text stream."""

    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write(self, text: str) -> None:
        self.stream.write(text)

    def close(self) -> None:
        self.stream.flush()


class PagerChannel:
    """Pipes text into a pager process such as ``less -R``."""

    def __init__(self, command: str):
        self.command = command
        self._finished = False
        env = dict(os.environ)
        # Keep ANSI styling when the pager is less
        env.setdefault("LESS", "-R")
        try:
            self._process = subprocess.Popen(
                shlex.split(command),
                stdin=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                env=env,
            )
        except (OSError, ValueError) as exc:
            raise OutputChannelError(f"cannot start pager {command!r}") from exc
        logger.debug("Started pager %r (pid %s)", command, self._process.pid)

    def write(self, text: str) -> None:
        if self._finished:
            return
        try:
            self._process.stdin.write(text)
        except BrokenPipeError:
            # The user quit the pager before reading everything
            self._finished = True

    def close(self) -> None:
        try:
            self._process.stdin.close()
        except BrokenPipeError:
            pass
        finally:
            returncode = self._process.wait()
            logger.debug("Pager %r exited with %s", self.command, returncode)


@contextmanager
def open_output_channel(config: DoclensConfig, stream: IO[str] | None = None) -> Iterator[OutputChannel]:
    """Open the output channel for this invocation and release it on exit."""
    stream = stream or sys.stdout
    channel: OutputChannel
    if config.use_pager and stream.isatty():
        channel = PagerChannel(config.pager_command)
    else:
        channel = PassthroughChannel(stream)
    try:
        yield channel
    finally:
        channel.close()
