"""doclens command line entry point."""

import argparse
import logging
import sys

from doclens import __version__
from doclens.config import DoclensConfig, get_config
from doclens.docs.config import ENTRIES_DIR_NAME
from doclens.docs.driver import Driver
from doclens.docs.store import Store
from doclens.errors import DoclensError, format_error_report
from doclens.presentation import PresentationDriver

logger = logging.getLogger("doclens.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doclens",
        description="A command line viewer for offline Rust crate documentation.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"doclens {__version__}")
    parser.add_argument(
        "query",
        nargs="?",
        help="Item name (e.g. 'HashMap') or path suffix (e.g. 'HashMap::insert') to look up",
    )
    return parser


def configure_logging(config: DoclensConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        stream=sys.stderr,
    )


def run(query: str | None, config: DoclensConfig) -> None:
    if not query:
        raise DoclensError("No search query was provided.")

    store = Store.load(config.home)
    driver = Driver(config.home / ENTRIES_DIR_NAME)
    PresentationDriver(store, driver, config=config).run(query)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the doclens command."""
    args = build_parser().parse_args(argv)
    config = get_config()
    configure_logging(config)

    try:
        run(args.query, config)
    except (DoclensError, OSError) as exc:
        for line in format_error_report(exc, backtrace=config.show_backtrace):
            logger.error(line)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
