"""File input/output for translation documents and packed tables.

Thin layer between the filesystem and the pure core: the collector, packer
and runtime only ever see StringsData and PackedStringsData instances.

Components:
    read_json / write_json - UTF-8 JSON file access with path-aware errors
    read_strings / read_packed / write_packed - typed document access
    iter_translation_files - recursive discovery of translation documents
    TableLoadResult / LoadSummary - outcome records for best-effort loading

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias, TypeVar

from respack.constants import HIDDEN_PREFIX, JSON_EXTENSION, PACK_SUFFIX
from respack.diagnostics import DocumentShapeError, DocumentSyntaxError
from respack.enums import LoadStatus
from respack.model import PackedStringsData, StringsData

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # JSON access
    "read_json",
    "write_json",
    # Typed documents
    "read_strings",
    "read_packed",
    "write_packed",
    # Discovery
    "iter_translation_files",
    # Load tracking
    "TableLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)

StrPath: TypeAlias = "str | os.PathLike[str]"

T = TypeVar("T")

_PACKED_EXTENSION = PACK_SUFFIX + JSON_EXTENSION


def read_json(path: StrPath) -> Any:
    """Read and decode a UTF-8 JSON file.

    Args:
        path: File to read

    Returns:
        Decoded JSON value

    Raises:
        OSError: If the file cannot be opened or read
        DocumentSyntaxError: If the content is not UTF-8, is not valid JSON,
            or is nested too deeply to decode
    """
    source = os.fspath(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{source}: invalid UTF-8 at byte {e.start}: {e.reason}"
        raise DocumentSyntaxError(msg, path=source) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"{source}:{e.lineno}:{e.colno}: invalid JSON: {e.msg}"
        raise DocumentSyntaxError(msg, path=source) from e
    except RecursionError as e:
        msg = f"{source}: invalid JSON: nesting too deep"
        raise DocumentSyntaxError(msg, path=source) from e


def write_json(path: StrPath, data: Any) -> None:
    """Encode data as JSON and write it, replacing any existing file.

    Non-ASCII text is written as-is (UTF-8), not escaped.

    Raises:
        OSError: If the file cannot be written
    """
    text = json.dumps(data, ensure_ascii=False)
    Path(path).write_text(text + "\n", encoding="utf-8")


def _with_path(path: StrPath, build: type[T], obj: object) -> T:
    try:
        return build.from_dict(obj)  # type: ignore[attr-defined,no-any-return]
    except DocumentShapeError as e:
        msg = f"{os.fspath(path)}: {e}"
        raise DocumentShapeError(msg, path=os.fspath(path)) from e


def read_strings(path: StrPath) -> StringsData:
    """Read a translation document.

    Raises:
        OSError: If the file cannot be read
        DocumentSyntaxError: If the content is not valid JSON
        DocumentShapeError: If the content is not a translation document
    """
    return _with_path(path, StringsData, read_json(path))


def read_packed(path: StrPath) -> PackedStringsData:
    """Read a packed table.

    Raises:
        OSError: If the file cannot be read
        DocumentSyntaxError: If the content is not valid JSON
        DocumentShapeError: If the content is not a packed table
    """
    return _with_path(path, PackedStringsData, read_json(path))


def write_packed(path: StrPath, table: PackedStringsData) -> None:
    write_json(path, table.to_dict())


def iter_translation_files(directory: StrPath) -> Iterator[Path]:
    """Yield translation documents below a directory.

    Entries are visited in sorted name order so that the traversal (and any
    error it raises) is the same on every platform. Entries whose name starts
    with a dot are skipped and subdirectories are descended into, but links
    to directories are not followed. Files
    without the .json extension are ignored, as are packed tables
    (.pak.json) written next to their sources.

    Args:
        directory: Directory to walk

    Yields:
        Paths of .json files

    Raises:
        OSError: If a directory cannot be listed
    """
    root = Path(directory)
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name.startswith(HIDDEN_PREFIX):
            logger.debug("Skipping hidden entry: %s", entry)
            continue
        if entry.is_symlink() and entry.is_dir():
            logger.debug("Not following directory link: %s", entry)
        elif entry.is_dir():
            yield from iter_translation_files(entry)
        elif entry.name.endswith(_PACKED_EXTENSION):
            logger.debug("Skipping packed table: %s", entry)
        elif entry.suffix == JSON_EXTENSION:
            yield entry
        else:
            logger.debug("Ignoring non-JSON file: %s", entry)


@dataclass(frozen=True, slots=True)
class TableLoadResult:
    """Result of loading a single packed table file.

    Attributes:
        path: File that was loaded
        status: Load status (success, not_found, error)
        lang: Language tag of the table (empty if it could not be read)
        error: Exception if status is ERROR or NOT_FOUND, None otherwise
    """

    path: str
    status: LoadStatus
    lang: str = ""
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of table load results.

    Attributes:
        results: All individual load results, in load order

    Example:
        >>> summary = domain.load_all(["en.pak.json", "et.pak.json"])
        >>> if not summary.all_successful:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.path}: {result.error}")
    """

    results: tuple[TableLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[TableLoadResult, ...]:
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[TableLoadResult, ...]:
        return tuple(r for r in self.results if r.is_not_found)

    @property
    def all_successful(self) -> bool:
        """True if every file was found and merged."""
        return self.errors == 0 and self.not_found == 0
