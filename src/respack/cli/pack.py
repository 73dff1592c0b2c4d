"""respack-pack: pack translation documents against resource identifiers.

Reads the identifier module written by respack-genids and converts each
translation document into a packed table next to it (en.json ->
en.pak.json).

Usage:
    respack-pack locales/en.json locales/et.json
    respack-pack --ids myapp/resid.py --verify locales/*.json

Every input is attempted even if an earlier one fails; each failure is
reported on its own line.

Exit Codes:
    0   All documents packed (or --always-exit-zero given)
    1   Identifier module unreadable, or at least one document failed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from respack.cli import configure_logging
from respack.constants import DEFAULT_RESID_FILE
from respack.diagnostics import RespackError
from respack.locale_utils import is_known_locale
from respack.packer import pack_file
from respack.resid import ResourceIDSet

__all__ = ["build_parser", "main"]

PROG = "respack-pack"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Pack translation documents into identifier-indexed string tables.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Translation documents (.json) to pack",
    )
    parser.add_argument(
        "--ids",
        type=Path,
        default=Path(DEFAULT_RESID_FILE),
        help=f"Identifier module file or package directory (default: {DEFAULT_RESID_FILE})",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that the identifier module matches its own VERSION_HASH before packing",
    )
    parser.add_argument(
        "--always-exit-zero",
        action="store_true",
        help="Exit with status 0 even if some documents failed to pack",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for respack-pack."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(PROG, verbose=args.verbose)

    try:
        ids = ResourceIDSet.load(args.ids)
        if args.verify:
            ids.verify()
    except (OSError, RespackError) as e:
        logger.error("error reading resource IDs: %s", e)
        return 1

    failed = 0
    for path in args.files:
        try:
            table = pack_file(path, ids)
        except (OSError, RespackError) as e:
            logger.error("error creating pack for '%s': %s", path, e)
            failed += 1
            continue
        if table.lang:
            is_known_locale(table.lang)
        else:
            logger.warning("%s: document has no language tag", path)

    if failed:
        logger.error("%d of %d documents failed to pack", failed, len(args.files))
        if not args.always_exit_zero:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
