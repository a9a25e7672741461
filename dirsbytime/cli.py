"""Command-line front door for dirsbytime.

Parses the optional directory argument, resolves it, and prints the
subdirectories oldest-modified first. Diagnostics go to standard output and
every failure exits with status 1.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from . import __version__
from .errors import DirsByTimeError, UsageError
from .paths import resolve_directory
from .render import print_listing, write_line
from .scan import list_directories

PROG = "dirsbytime"
EXIT_OK = 0
EXIT_FAILURE = 1


class ListingArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors end the run like any other failure."""

    def error(self, message: str):
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = ListingArgumentParser(
        prog=PROG,
        description="List immediate subdirectories sorted by modification time, oldest first.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to list. Defaults to current directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``argv``, accepting one dash-prefixed directory name.

    argparse reads ``-old`` as an unknown option; when no positional was
    given, a single such leftover is taken as the directory. ``--`` also
    works, and anything beyond one directory is a ``UsageError``.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras and args.directory is None and len(extras) == 1:
        args.directory = extras[0]
    elif extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    return args


def main(
    argv: Sequence[str] | None = None,
    default_path: Path | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run one listing and return the process exit code.

    ``default_path`` and ``stream`` are primarily for tests; when omitted the
    current working directory and ``sys.stdout`` are used.
    """
    out = stream if stream is not None else sys.stdout

    try:
        args = parse_arguments(argv)
        directory = resolve_directory(args.directory, default_path=default_path)
        entries = list_directories(directory)
    except DirsByTimeError as exc:
        write_line(out, str(exc))
        return EXIT_FAILURE

    print_listing(entries, directory, out)
    return EXIT_OK


def run() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
