"""Translation name collection.

NameSet gathers the names (keys of the "strings" object) of translation
documents found in files and directory trees, deduplicating them into one
set. Values are never looked at, so any language's documents can be used;
usually all languages are scanned so that names present only in a
not-yet-complete translation still get an identifier.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from respack.constants import JSON_EXTENSION
from respack.diagnostics import UnsupportedFileTypeError
from respack.identifiers import assign_identifiers, compute_version_hash
from respack.loading import StrPath, iter_translation_files, read_strings

__all__ = ["NameSet"]

logger = logging.getLogger(__name__)


class NameSet:
    """Set of translation names.

    Insertion order is irrelevant: names are only ever observed in sorted
    order, which is also the order resource identifiers are assigned in.

    Not thread-safe. Build the set from a single thread.

    Example:
        >>> names = NameSet(["Greeting"])
        >>> names.load("locales")
        >>> names.names()
        ('Farewell', 'Greeting', 'GreetingWithName')
        >>> names.identifiers()["Greeting"]
        1
    """

    __slots__ = ("_names", "_sorted")

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set()
        # Sorted view, rebuilt lazily after additions
        self._sorted: tuple[str, ...] | None = None
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        """Add a name. Adding a name already present is a no-op."""
        if name not in self._names:
            self._names.add(name)
            self._sorted = None

    def load(self, path: StrPath) -> None:
        """Add the names of every translation document found at path.

        A directory is walked recursively (hidden entries skipped, non-JSON
        files ignored). A file given directly must have the .json extension.

        Args:
            path: Translation document or directory

        Raises:
            FileNotFoundError: If path does not exist
            OSError: If a file or directory cannot be read
            UnsupportedFileTypeError: If path is a file without the .json extension
            DocumentSyntaxError: If a document is not valid JSON
            DocumentShapeError: If a document is not a translation document
        """
        p = Path(path)
        if p.is_dir():
            count = 0
            for file in iter_translation_files(p):
                self._load_file(file)
                count += 1
            logger.debug("Scanned %d translation files below %s", count, p)
            return
        if not p.exists():
            msg = f"no such file or directory: '{os.fspath(path)}'"
            raise FileNotFoundError(msg)
        if p.suffix != JSON_EXTENSION:
            msg = f"{os.fspath(path)}: not a JSON file"
            raise UnsupportedFileTypeError(msg, path=os.fspath(path))
        self._load_file(p)

    def _load_file(self, path: Path) -> None:
        data = read_strings(path)
        if not data.strings:
            logger.warning("Translation document has no strings: %s", path)
        for name in data.strings:
            self.add(name)
        logger.debug("Loaded %d names from %s", len(data.strings), path)

    def names(self) -> tuple[str, ...]:
        """Names in sorted order; position equals resource identifier."""
        if self._sorted is None:
            self._sorted = tuple(sorted(self._names))
        return self._sorted

    def identifiers(self) -> dict[str, int]:
        """Map each name to its resource identifier."""
        return assign_identifiers(self.names())

    def version_hash(self) -> str:
        """Version hash uniquely identifying this set of names."""
        return compute_version_hash(self.names())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"NameSet({len(self._names)} names)"
