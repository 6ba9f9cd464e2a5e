"""Shared CLI plumbing: logging setup and the Error:/exit-status convention."""
import argparse
import logging
import sys
from typing import Callable

from wavecodes.config import LOG_FORMAT, LOG_LEVEL
from wavecodes.errors import WaveCodeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else LOG_LEVEL, format=LOG_FORMAT)


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-track detail")


def run_command(run: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """Run a command; print failures to stderr as 'Error: ...' and return the exit status."""
    setup_logging(args.verbose)
    try:
        run(args)
    except WaveCodeError as e:
        logger.debug("Command failed (%s)", e.kind.value)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
