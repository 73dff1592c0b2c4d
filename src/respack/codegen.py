"""Generation of the resource identifier module.

The identifier module is ordinary Python source that application code
imports to refer to translations by constant instead of by name:

    # Code generated by "respack-genids locales"; DO NOT EDIT.
    \"\"\"Resource identifiers generated from translation names.\"\"\"

    from typing import Final

    # VERSION_HASH is a string uniquely identifying this set of resource IDs
    VERSION_HASH: Final[str] = "9f1c0f3d..."

    # Resource identifiers
    Greeting: Final[int] = 0
    GreetingWithName: Final[int] = 1

respack-pack reads the same module back through respack.declarations, so
generator and extractor agree on zero-based sequential values by
construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import keyword
import logging
import os
import unicodedata
from collections.abc import Iterable
from pathlib import Path

from respack.constants import (
    BLANK_NAME,
    DEFAULT_RESID_FILE,
    GENERATED_HEADER,
    PYTHON_EXTENSION,
    RESID_SUFFIX,
    VERSION_HASH_NAME,
)
from respack.diagnostics import InvalidNameError
from respack.identifiers import compute_version_hash, sort_names
from respack.loading import StrPath

__all__ = [
    "default_output_path",
    "render_resid_module",
    "validate_name",
    "write_resid_module",
]

logger = logging.getLogger(__name__)

_DEFAULT_COMMAND = "respack-genids"


def validate_name(name: str) -> None:
    """Check that a translation name can be emitted as a constant.

    Raises:
        InvalidNameError: If name is not an identifier, is a keyword, or is
            one of the reserved names VERSION_HASH and _
    """
    if not name.isidentifier():
        msg = f"translation name '{name}' is not a valid Python identifier"
        raise InvalidNameError(msg, name=name)
    if unicodedata.normalize("NFKC", name) != name:
        # The parser folds identifiers to NFKC; the name would not survive a round trip
        msg = f"translation name '{name}' is not in NFKC normal form"
        raise InvalidNameError(msg, name=name)
    if keyword.iskeyword(name):
        msg = f"translation name '{name}' is a Python keyword"
        raise InvalidNameError(msg, name=name)
    if name == VERSION_HASH_NAME:
        msg = f"translation name '{name}' is reserved for the version hash"
        raise InvalidNameError(msg, name=name)
    if name == BLANK_NAME:
        msg = f"translation name '{name}' is reserved as a placeholder"
        raise InvalidNameError(msg, name=name)


def render_resid_module(names: Iterable[str], *, command: str = _DEFAULT_COMMAND) -> str:
    """Render the identifier module for a set of names.

    Args:
        names: Translation names (any order, duplicates allowed)
        command: Command line recorded in the generated header

    Returns:
        Python source text

    Raises:
        InvalidNameError: If any name cannot be emitted as a constant
    """
    ordered = sort_names(names)
    for name in ordered:
        validate_name(name)

    lines = [
        GENERATED_HEADER.format(command=command),
        '"""Resource identifiers generated from translation names."""',
        "",
        "from typing import Final",
        "",
        "# VERSION_HASH is a string uniquely identifying this set of resource IDs",
        f'{VERSION_HASH_NAME}: Final[str] = "{compute_version_hash(ordered)}"',
        "",
        "# Resource identifiers",
    ]
    lines.extend(f"{name}: Final[int] = {index}" for index, name in enumerate(ordered))
    return "\n".join(lines) + "\n"


def write_resid_module(
    path: StrPath, names: Iterable[str], *, command: str = _DEFAULT_COMMAND
) -> None:
    """Render the identifier module and write it to path.

    Nothing is written if rendering fails.

    Raises:
        InvalidNameError: If any name cannot be emitted as a constant
        OSError: If the file cannot be written
    """
    source = render_resid_module(names, command=command)
    Path(path).write_text(source, encoding="utf-8")
    logger.info("Wrote resource identifiers to %s", os.fspath(path))


def default_output_path(anchor: StrPath | None = None) -> Path:
    """Compute where the identifier module is written.

    Args:
        anchor: Source file the identifiers belong to (optional)

    Returns:
        resid.py without an anchor; foo_resid.py for anchor foo.py; the
        anchor itself for any other extension

    Example:
        >>> default_output_path("pkg/strings.py")
        PosixPath('pkg/strings_resid.py')
    """
    if anchor is None or os.fspath(anchor) == "":
        return Path(DEFAULT_RESID_FILE)
    p = Path(anchor)
    if p.suffix == PYTHON_EXTENSION:
        return p.with_name(p.stem + RESID_SUFFIX + PYTHON_EXTENSION)
    return p
