"""
Command line front end.

Reads a file (or stdin when no path is given), tallies its characters and
prints the report sections selected by the flags.
"""

import argparse
import logging
import os
import sys

from . import __version__
from .config import ReportOptions
from .errors import InputError
from .report import write_reports
from .tally import tally_stream

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charstat",
        description="Character, Unicode category and script frequencies of a UTF-8 text.",
    )
    parser.add_argument("path", nargs="?", default=None,
                        help="input file (default: read from stdin)")
    parser.add_argument("--no-chars", action="store_true", help="do not print character information")
    parser.add_argument("--cats", action="store_true", help="print unicode categories")
    parser.add_argument("--scripts", action="store_true", help="print contained script names")
    parser.add_argument("--utf8", action="store_true", help="print utf8 codes")
    parser.add_argument("--short", action="store_true", help="omit long category names")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress to stderr (repeat for debug output)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def log_level(verbosity: int) -> int:
    """Logging level for the number of -v flags given."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int):
    logging.basicConfig(level=log_level(verbosity), format="%(levelname)s: %(message)s", stream=sys.stderr)


def open_input(path):
    """Binary stream for ``path``, or stdin's underlying buffer when ``path`` is None."""
    if path is None:
        return sys.stdin.buffer
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputError(path, e.strerror or str(e)) from e


def run(args) -> int:
    options = ReportOptions.from_args(args)
    stream = open_input(args.path)
    try:
        counts = tally_stream(stream)
    finally:
        if stream is not sys.stdin.buffer:
            stream.close()
    logger.info("Read %d characters, %d distinct", sum(counts.values()), len(counts))
    write_reports(sys.stdout, counts, options)
    sys.stdout.flush()
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except InputError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # Downstream closed the pipe (e.g. `| head`). Point stdout at devnull so
        # the interpreter does not fail again flushing it on exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1


if __name__ == "__main__":
    sys.exit(main())
