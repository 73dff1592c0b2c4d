"""Domain: registry of loaded languages.

An application creates one Domain (or several, for independent sets of
resource identifiers), optionally constrains it to the version hash of its
identifier module, loads its packed tables at startup and then resolves
identifiers through it. There is no process-wide default instance: pass the
domain to the code that needs it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from respack.diagnostics import RespackError, UnknownLanguageError
from respack.enums import LoadStatus
from respack.integrity import IntegrityContext, VersionHashMismatchError
from respack.loading import LoadSummary, StrPath, TableLoadResult, read_packed
from respack.model import PackedStringsData
from respack.runtime.language import Language

__all__ = ["Domain"]

logger = logging.getLogger(__name__)


class Domain:
    """Set of loaded languages sharing one resource identifier space.

    Thread Safety:
        Not thread-safe. The intended pattern is a single thread loading all
        tables at startup, then any number of threads resolving strings.
        Applications that load while other threads resolve must guard both
        with an external lock.

    Example:
        >>> import resid
        >>> domain = Domain(resid.VERSION_HASH)
        >>> domain.load_strings("strings/en.pak.json")
        >>> domain.load_strings("strings/et.pak.json")
        >>> domain.language("en").string(resid.Greeting)
        'Hello!'
    """

    __slots__ = ("_langs", "_version_hash")

    def __init__(self, version_hash: str = "") -> None:
        """Initialize an empty domain.

        Args:
            version_hash: Hash every loaded table must carry ("" disables the check)
        """
        self._langs: dict[str, Language] = {}
        self._version_hash = version_hash

    def set_version_hash(self, version_hash: str) -> None:
        """Require all future tables to carry version_hash.

        Setting this to an empty string disables the check. Tables already
        loaded are not re-checked.
        """
        self._version_hash = version_hash

    @property
    def version_hash(self) -> str:
        """Hash every added table must carry (empty when the check is disabled)."""
        return self._version_hash

    @property
    def languages(self) -> tuple[str, ...]:
        """Tags of the loaded languages, in load order."""
        return tuple(self._langs)

    def __contains__(self, name: object) -> bool:
        return name in self._langs

    def __repr__(self) -> str:
        return f"Domain(languages={list(self._langs)!r}, version_hash={self._version_hash!r})"

    def language(self, name: str) -> Language:
        """Return a loaded language by its tag.

        Raises:
            UnknownLanguageError: If no table for the language was loaded
        """
        lang = self._langs.get(name)
        if lang is None:
            msg = f"unknown language: {name}"
            raise UnknownLanguageError(msg, name=name)
        return lang

    def string(self, name: str, resource_id: int) -> str:
        """Resolve a resource identifier in a language.

        Returns:
            The translation, or "" if the language is not loaded or has no
            translation for the identifier
        """
        lang = self._langs.get(name)
        if lang is None:
            return ""
        return lang.string(resource_id)

    def add_table(self, table: PackedStringsData) -> None:
        """Merge a packed table into the language it belongs to.

        The language is created on its first table. A rejected table leaves
        the domain unchanged, including not registering a new language.

        Raises:
            VersionHashMismatchError: If the domain or the target language is
                bound to another version hash
        """
        if self._version_hash and self._version_hash != table.version_hash:
            msg = f"version hash mismatch for table of language '{table.lang}'"
            raise VersionHashMismatchError(
                msg,
                IntegrityContext(
                    component="domain",
                    operation="add_table",
                    key=table.lang,
                    expected=self._version_hash,
                    actual=table.version_hash,
                ),
            )
        lang = self._langs.get(table.lang)
        if lang is None:
            lang = Language(table.lang)
            lang.add_table(table)
            self._langs[table.lang] = lang
            logger.info("Loaded language '%s' (%d strings)", table.lang, len(lang))
            return
        lang.add_table(table)

    def load_strings(self, path: StrPath) -> None:
        """Read a packed table file and merge it into this domain.

        Raises:
            OSError: If the file cannot be read
            DocumentSyntaxError: If the file is not valid JSON
            DocumentShapeError: If the file is not a packed table
            VersionHashMismatchError: See add_table()
        """
        table = read_packed(path)
        try:
            self.add_table(table)
        except RespackError as e:
            logger.error("Rejected strings file %s: %s", os.fspath(path), e)
            raise

    def load_all(self, paths: Iterable[StrPath]) -> LoadSummary:
        """Load several packed table files, recording each outcome.

        Unlike load_strings(), failures do not raise: each file's result is
        recorded in the returned summary and loading continues with the next
        file. Check summary.all_successful before serving traffic.

        Returns:
            LoadSummary with one TableLoadResult per path, in order
        """
        results: list[TableLoadResult] = []
        for path in paths:
            source = os.fspath(path)
            try:
                table = read_packed(path)
                self.add_table(table)
            except FileNotFoundError as e:
                results.append(TableLoadResult(source, LoadStatus.NOT_FOUND, error=e))
            except (OSError, RespackError) as e:
                results.append(TableLoadResult(source, LoadStatus.ERROR, error=e))
            else:
                results.append(TableLoadResult(source, LoadStatus.SUCCESS, lang=table.lang))
        summary = LoadSummary(results=tuple(results))
        if not summary.all_successful:
            logger.warning("Some strings files failed to load: %r", summary)
        return summary
