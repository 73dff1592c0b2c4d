"""Packing of translation documents into identifier-indexed tables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from respack.constants import JSON_EXTENSION, PACK_SUFFIX
from respack.diagnostics import DocumentError, UnknownNameError, UnsupportedFileTypeError
from respack.loading import StrPath, read_strings, write_packed
from respack.model import PackedStringsData, StringsData
from respack.resid import ResourceIDSet

__all__ = ["pack_file", "pack_file_name", "pack_strings"]

logger = logging.getLogger(__name__)


def pack_strings(data: StringsData, ids: ResourceIDSet) -> PackedStringsData:
    """Lay out a language's translations by resource identifier.

    The table has max_id() + 1 slots. Names the document does not translate
    keep an empty slot; partial translations are fine.

    Args:
        data: Translations for one language
        ids: Identifier set to pack against

    Returns:
        Packed table carrying data.lang and ids.version_hash

    Raises:
        UnknownNameError: If the document translates a name that has no
            identifier (stale or mistyped key)

    Example:
        >>> ids = ResourceIDSet("h", {"A": 0, "B": 1, "C": 2})
        >>> pack_strings(StringsData("en", {"A": "x", "C": "z"}), ids).strings
        ('x', '', 'z')
    """
    strings = [""] * (ids.max_id() + 1)
    for name, value in data.strings.items():
        resource_id = ids.names.get(name)
        if resource_id is None:
            msg = f"no resource ID for name '{name}'"
            raise UnknownNameError(msg, name=name)
        strings[resource_id] = value
    return PackedStringsData(lang=data.lang, version_hash=ids.version_hash, strings=tuple(strings))


def pack_file_name(path: StrPath) -> Path:
    """Output path for a packed document: en.json -> en.pak.json.

    Paths without the .json extension are returned unchanged.
    """
    p = Path(path)
    if p.suffix == JSON_EXTENSION:
        return p.with_suffix(PACK_SUFFIX + JSON_EXTENSION)
    return p


def pack_file(path: StrPath, ids: ResourceIDSet) -> PackedStringsData:
    """Pack a translation document file next to itself.

    Args:
        path: Translation document (.json)
        ids: Identifier set to pack against

    Returns:
        The packed table written to pack_file_name(path)

    Raises:
        OSError: If the document cannot be read or the output written
        UnsupportedFileTypeError: If path does not have the .json extension
        DocumentError: If the document is malformed
        UnknownNameError: See pack_strings()
    """
    out = pack_file_name(path)
    if out == Path(path):
        msg = f"{os.fspath(path)}: not a JSON file"
        raise UnsupportedFileTypeError(msg, path=os.fspath(path))
    try:
        data = read_strings(path)
    except DocumentError as e:
        msg = f"could not read language file: {e}"
        raise type(e)(msg, path=os.fspath(path)) from e
    try:
        table = pack_strings(data, ids)
    except UnknownNameError as e:
        raise UnknownNameError(str(e), name=e.name, path=os.fspath(path)) from e
    write_packed(out, table)
    logger.info(
        "Packed %s (%s, %d of %d strings) to %s",
        os.fspath(path),
        table.lang or "<no lang>",
        len(data.strings),
        len(table),
        out,
    )
    return table
