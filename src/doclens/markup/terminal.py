"""Terminal capabilities used by the renderer.

The renderer needs exactly three things from the terminal: its width, a way
to style text bold, and a markdown-to-ANSI converter. They are grouped behind
the ``Terminal`` protocol so rendering can be tested with a fixed width and
without a real TTY.
"""

from __future__ import annotations

import logging
import re
import shutil
from typing import Protocol

from rich.console import Console
from rich.markdown import Markdown
from rich.style import Style

logger = logging.getLogger("doclens.terminal")

FALLBACK_WIDTH = 80

_BOLD = Style(bold=True)

# Padding rich adds to fill the console width, possibly followed by reset codes.
_TRAILING_PADDING = re.compile(r"[ \t]+((?:\x1b\[[0-9;]*m)*)$", re.MULTILINE)


class Terminal(Protocol):
    def query_width(self) -> int: ...

    def bold(self, text: str) -> str: ...

    def render_markdown(self, text: str, width: int) -> str: ...


class RichTerminal:
    """Terminal capability backed by rich."""

    def query_width(self) -> int:
        """Return the current terminal width, or 80 when it cannot be determined."""
        columns = shutil.get_terminal_size(fallback=(0, 0)).columns
        if columns <= 0:
            logger.debug("Terminal width unavailable, using %d columns", FALLBACK_WIDTH)
            return FALLBACK_WIDTH
        return columns

    def bold(self, text: str) -> str:
        return _BOLD.render(text)

    def render_markdown(self, text: str, width: int) -> str:
        """Render markdown to ANSI-colored text wrapped at ``width`` columns."""
        console = Console(
            force_terminal=True,
            color_system="standard",
            width=width,
            highlight=False,
            emoji=False,
        )
        with console.capture() as capture:
            console.print(Markdown(text))
        return _TRAILING_PADDING.sub(r"\1", capture.get().rstrip("\n"))
