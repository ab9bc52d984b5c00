"""nbtcompare command-line interface.

Usage:
    python3 -m nbtcompare compare left.nbt right.nbt
    python3 -m nbtcompare compare level.dat level.dat_old --exclude-last-update
    python3 -m nbtcompare compare a.nbt b.nbt --exclude Time -v
    python3 -m nbtcompare version

Inputs must already be decompressed.  Exit status is 0 when the documents
are equal, 1 when they differ, and 2 on a read or decode error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import LAST_UPDATE, NbtError, __version__, compare

logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nbtcompare",
        description="Structural equality of uncompressed NBT documents",
    )
    sub = parser.add_subparsers(dest="command")

    # ── compare ──
    cmp_p = sub.add_parser("compare", help="Compare two NBT files")
    cmp_p.add_argument("left", metavar="LEFT", help="First NBT file")
    cmp_p.add_argument("right", metavar="RIGHT", help="Second NBT file")
    excl_g = cmp_p.add_mutually_exclusive_group()
    excl_g.add_argument("--exclude", metavar="NAME",
                        help="Ignore this top-level field on both sides")
    excl_g.add_argument("--exclude-last-update", action="store_true",
                        help="Ignore the top-level LastUpdate field")
    cmp_p.add_argument("--verbose", "-v", action="store_true",
                       help="Enable debug logging (can also set NBTCOMPARE_VERBOSE=1)")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        verbose = os.environ.get("NBTCOMPARE_VERBOSE", "") not in ("", "0")
    if verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _read_input(filepath: str) -> bytes:
    with open(filepath, "rb") as f:
        data = f.read()
    logger.debug("read %d bytes from %s", len(data), filepath)
    return data


def _cmd_compare(args: argparse.Namespace) -> int:
    left = _read_input(args.left)
    right = _read_input(args.right)

    exclude = args.exclude
    if args.exclude_last_update:
        exclude = LAST_UPDATE

    if compare(left, right, exclude):
        print("equal")
        return EXIT_EQUAL
    print("different")
    return EXIT_DIFFERENT


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    if args.command == "version":
        print(f"nbtcompare {__version__}")
        return

    _configure_logging(args.verbose)
    try:
        status = _cmd_compare(args)
    except NbtError as e:
        side = f" ({e.side})" if e.side else ""
        print(f"nbtcompare: error [{e.code}]{side}: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except OSError as e:
        print(f"nbtcompare: cannot read input: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    sys.exit(status)


if __name__ == "__main__":
    main()
