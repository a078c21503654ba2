"""Command-line front door for lazyls.

Parses CLI options into a read-only ``ListingOptions``, resolves per-run
collaborators, and writes the rendered listing to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .errors import ListingError
from .listing import DEFAULT_PATH, ListingContext, render_listing
from .options import ListingOptions


def build_parser() -> argparse.ArgumentParser:
    # -h means --human-readable, so argparse's own help flag is replaced by -?.
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory contents.",
        add_help=False,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Paths to list. Defaults to the current directory.")
    parser.add_argument("-?", "--help", action="help", help="Show this help message and exit.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-a", "--all", action="store_true", help="Do not ignore entries starting with '.'.")
    parser.add_argument("-l", dest="long", action="store_true", help="Use a long listing format.")
    parser.add_argument("-h", "--human-readable", action="store_true", help="Print sizes like 1.0K, 234M, 2.0G.")
    parser.add_argument("-B", "--ignore-backups", action="store_true", help="Ignore entries ending with '~'.")
    parser.add_argument("-d", "--directory", action="store_true", help="List only directory entries.")
    parser.add_argument("--group-directories-first", action="store_true", help="Group directories before files.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, render the listing, and write it to stdout.

    A path that cannot be listed aborts the run through ``SystemExit`` with a
    diagnostic; entries with unreadable metadata never do.
    """
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    context = ListingContext.for_run(ListingOptions.from_namespace(args))
    try:
        output = render_listing(args.paths or [DEFAULT_PATH], context)
    except ListingError as exc:
        raise SystemExit(f"lazyls: {exc.reason}") from exc
    sys.stdout.write(output)


if __name__ == "__main__":
    main()
