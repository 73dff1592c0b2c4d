"""Command-line entry points.

respack-genids - collect translation names and write the identifier module
respack-pack   - pack translation documents against the identifier module

Both report through the respack logger hierarchy; configure_logging() sends
it to stderr with the program name as prefix.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["configure_logging"]

_HANDLER_NAME = "respack-cli"


def configure_logging(prog: str, *, verbose: bool = False) -> None:
    """Route respack log records to stderr as "<prog>: <message>".

    Calling it again replaces the handler installed by a previous call, so
    entry points can be invoked repeatedly in one process.

    Args:
        prog: Program name used as message prefix
        verbose: Emit DEBUG records (default: INFO and above)
    """
    package_logger = logging.getLogger("respack")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(f"{prog}: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
