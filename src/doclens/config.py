"""Runtime configuration for doclens."""

from dataclasses import dataclass
from pathlib import Path
import logging
import os

DEFAULT_MAX_RESULTS = 10
DEFAULT_PAGER_COMMAND = "less -R"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_log_level(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class DoclensConfig:
    home: Path
    max_results: int
    use_pager: bool
    pager_command: str
    log_level: int
    show_backtrace: bool


def get_config() -> DoclensConfig:
    """Load doclens config from environment variables."""
    home = os.getenv("DOCLENS_HOME")
    pager_command = os.getenv("DOCLENS_PAGER_COMMAND") or os.getenv("PAGER")
    # Never show more than DEFAULT_MAX_RESULTS candidates.
    max_results = _env_int("DOCLENS_MAX_RESULTS", DEFAULT_MAX_RESULTS)
    return DoclensConfig(
        home=Path(home).expanduser() if home else Path.home() / ".doclens",
        max_results=min(DEFAULT_MAX_RESULTS, max(1, max_results)),
        use_pager=_env_bool("DOCLENS_PAGER", True),
        pager_command=pager_command or DEFAULT_PAGER_COMMAND,
        log_level=_env_log_level("DOCLENS_LOG", logging.WARNING),
        show_backtrace=_env_bool("DOCLENS_BACKTRACE", False),
    )
