"""Resolved language: merged packed tables for one language tag.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os

from respack.diagnostics import LanguageMismatchError
from respack.integrity import IntegrityContext, VersionHashMismatchError
from respack.loading import StrPath, read_packed
from respack.model import PackedStringsData

__all__ = ["Language"]

logger = logging.getLogger(__name__)


class Language:
    """Translated strings of one language, indexed by resource identifier.

    Tables are merged incrementally: a base pack can be followed by patch
    packs. The first table binds the language's tag and version hash; later
    tables must match both. Merging grows the string list as needed (it never
    shrinks) and only copies non-empty strings, so a later table with gaps
    never erases a translation loaded earlier.

    Lookups never fail: an identifier without a translation resolves to "".

    Thread Safety:
        Not thread-safe. Load all tables before sharing the language across
        threads, or guard add_table() with an external lock.

    Example:
        >>> lang = Language("en")
        >>> lang.add_table(PackedStringsData("en", "h", ("x", "", "")))
        >>> lang.add_table(PackedStringsData("en", "h", ("", "y")))
        >>> lang.strings
        ('x', 'y', '')
        >>> lang.string(7)
        ''
    """

    __slots__ = ("_name", "_strings", "_version_hash")

    def __init__(self, name: str = "") -> None:
        """Initialize an empty language.

        Args:
            name: Language tag. An empty tag is bound by the first table.
        """
        self._name = name
        self._version_hash = ""
        self._strings: list[str] = []

    @property
    def name(self) -> str:
        """Language tag (read-only)."""
        return self._name

    @property
    def version_hash(self) -> str:
        """Version hash bound by the first table ("" while unconstrained)."""
        return self._version_hash

    @property
    def strings(self) -> tuple[str, ...]:
        """Snapshot of the merged strings."""
        return tuple(self._strings)

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return (
            f"Language(name={self._name!r}, version_hash={self._version_hash!r}, "
            f"strings={len(self._strings)})"
        )

    def string(self, resource_id: int) -> str:
        """Return the string for a resource identifier.

        Returns:
            The translation, or "" if the identifier is out of range,
            negative, or not an integer
        """
        if (
            isinstance(resource_id, int)
            and not isinstance(resource_id, bool)
            and 0 <= resource_id < len(self._strings)
        ):
            return self._strings[resource_id]
        return ""

    __getitem__ = string

    def add_table(self, table: PackedStringsData) -> None:
        """Merge a packed table into this language.

        All checks happen before any mutation: a rejected table leaves the
        language exactly as it was.

        Raises:
            LanguageMismatchError: If the table is for another language
            VersionHashMismatchError: If the language is bound to a version
                hash and the table carries a different one
        """
        if self._name and table.lang != self._name:
            msg = f"language names mismatch: expected '{self._name}', got '{table.lang}'"
            raise LanguageMismatchError(msg, expected=self._name, actual=table.lang)
        if self._version_hash and self._version_hash != table.version_hash:
            msg = f"version hash mismatch for language '{self._name}'"
            raise VersionHashMismatchError(
                msg,
                IntegrityContext(
                    component="language",
                    operation="add_table",
                    key=self._name,
                    expected=self._version_hash,
                    actual=table.version_hash,
                ),
            )

        self._name = table.lang
        self._version_hash = table.version_hash
        if len(table.strings) > len(self._strings):
            self._strings.extend([""] * (len(table.strings) - len(self._strings)))
        merged = 0
        for resource_id, value in enumerate(table.strings):
            if value:
                self._strings[resource_id] = value
                merged += 1
        logger.debug(
            "Merged %d strings into language '%s' (now %d slots)",
            merged,
            self._name,
            len(self._strings),
        )

    def load_strings(self, path: StrPath) -> None:
        """Read a packed table file and merge it into this language.

        Raises:
            OSError: If the file cannot be read
            DocumentSyntaxError: If the file is not valid JSON
            DocumentShapeError: If the file is not a packed table
            LanguageMismatchError: See add_table()
            VersionHashMismatchError: See add_table()
        """
        self.add_table(read_packed(path))
        logger.debug("Loaded strings from %s into language '%s'", os.fspath(path), self._name)
