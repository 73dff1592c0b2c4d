"""respack-genids: generate the resource identifier module.

Collects the translation names of every source (translation documents or
directories of them) and writes a Python module declaring one integer
constant per name plus VERSION_HASH.

Usage:
    respack-genids locales/
    respack-genids -o myapp/resid.py locales/en.json locales/et.json
    respack-genids --anchor myapp/strings.py locales/   # -> myapp/strings_resid.py

Exit Codes:
    0   Module written
    1   Any source failed to load, or the module could not be written.
        Nothing is written in that case.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from respack.cli import configure_logging
from respack.codegen import default_output_path, write_resid_module
from respack.collector import NameSet
from respack.diagnostics import RespackError

__all__ = ["build_parser", "main"]

PROG = "respack-genids"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate resource identifiers from translation documents.",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        type=Path,
        help="Translation documents (.json) or directories containing them",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Path of the generated module (default: resid.py)",
    )
    output.add_argument(
        "--anchor",
        type=Path,
        help="Source file the identifiers belong to; foo.py writes foo_resid.py",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file scanned",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for respack-genids."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(PROG, verbose=args.verbose)

    names = NameSet()
    try:
        for source in args.sources:
            names.load(source)
        output: Path = args.output or default_output_path(args.anchor)
        command = " ".join([PROG, *(str(s) for s in args.sources)])
        write_resid_module(output, names, command=command)
    except (OSError, RespackError) as e:
        logger.error("%s", e)
        return 1

    logger.info("%d resource identifiers, version hash %s", len(names), names.version_hash())
    return 0


if __name__ == "__main__":
    sys.exit(main())
