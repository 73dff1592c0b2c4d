"""Translation documents and packed string tables.

StringsData is the authoring format: one language tag and a mapping of
translation name to translated text. PackedStringsData is the generated
format: the same translations laid out as a dense list indexed by resource
identifier, tagged with the version hash of the identifier set it was packed
against.

Wire formats:
    StringsData:       {"lang": "en", "strings": {"Greeting": "Hello"}}
    PackedStringsData: {"Lang": "en", "VersionHash": "...", "Strings": ["Hello"]}

The packed field names are kept as-is for compatibility with existing
.pak.json files; treat the packed structure as internal and regenerate it
rather than editing it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from respack.constants import (
    DOC_LANG_FIELD,
    DOC_STRINGS_FIELD,
    PAK_LANG_FIELD,
    PAK_STRINGS_FIELD,
    PAK_VERSION_HASH_FIELD,
)
from respack.diagnostics import DocumentShapeError

__all__ = ["PackedStringsData", "StringsData"]


def _require_object(obj: object, what: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        msg = f"{what} must be a JSON object, got {type(obj).__name__}"
        raise DocumentShapeError(msg)
    return obj


def _optional_str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"field '{key}' must be a string, got {type(value).__name__}"
        raise DocumentShapeError(msg)
    return value


@dataclass(frozen=True, slots=True)
class StringsData:
    """Translations for one language, keyed by translation name.

    Not guaranteed to cover every known name, nor to contain only known
    names: the packer decides what is acceptable.

    Attributes:
        lang: Language tag (e.g., 'en', 'et', 'pt-BR')
        strings: Read-only mapping of translation name to translated text
    """

    lang: str = ""
    strings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", MappingProxyType(dict(self.strings)))

    @classmethod
    def from_dict(cls, obj: object) -> StringsData:
        """Build from decoded JSON, checking its shape.

        Args:
            obj: Decoded JSON document

        Returns:
            StringsData with the document's tag and translations

        Raises:
            DocumentShapeError: If the document is not an object, 'lang' is
                not a string, or 'strings' is not an object of strings
        """
        doc = _require_object(obj, "translation document")
        lang = _optional_str(doc, DOC_LANG_FIELD)
        raw = doc.get(DOC_STRINGS_FIELD)
        if raw is None:
            return cls(lang=lang)
        strings = _require_object(raw, f"field '{DOC_STRINGS_FIELD}'")
        for name, value in strings.items():
            if not isinstance(value, str):
                msg = (
                    f"translation for name '{name}' must be a string, "
                    f"got {type(value).__name__}"
                )
                raise DocumentShapeError(msg)
        return cls(lang=lang, strings=strings)

    def to_dict(self) -> dict[str, Any]:
        return {DOC_LANG_FIELD: self.lang, DOC_STRINGS_FIELD: dict(self.strings)}


@dataclass(frozen=True, slots=True)
class PackedStringsData:
    """Dense, identifier-indexed translations for one language.

    Slot i holds the translation of the name assigned identifier i, or an
    empty string when the language has no translation for it.

    Attributes:
        lang: Language tag
        version_hash: Version hash of the identifier set used for packing
        strings: Translations indexed by resource identifier
    """

    lang: str = ""
    version_hash: str = ""
    strings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Lists are accepted; stored as a tuple
        object.__setattr__(self, "strings", tuple(self.strings))

    def __len__(self) -> int:
        return len(self.strings)

    @classmethod
    def from_dict(cls, obj: object) -> PackedStringsData:
        """Build from decoded JSON, checking its shape.

        Raises:
            DocumentShapeError: If the structure does not match a packed table
        """
        doc = _require_object(obj, "packed table")
        lang = _optional_str(doc, PAK_LANG_FIELD)
        version_hash = _optional_str(doc, PAK_VERSION_HASH_FIELD)
        raw = doc.get(PAK_STRINGS_FIELD)
        if raw is None:
            return cls(lang=lang, version_hash=version_hash)
        if not isinstance(raw, list):
            msg = f"field '{PAK_STRINGS_FIELD}' must be a JSON array, got {type(raw).__name__}"
            raise DocumentShapeError(msg)
        for index, value in enumerate(raw):
            if not isinstance(value, str):
                msg = f"packed string {index} must be a string, got {type(value).__name__}"
                raise DocumentShapeError(msg)
        return cls(lang=lang, version_hash=version_hash, strings=tuple(raw))

    def to_dict(self) -> dict[str, Any]:
        return {
            PAK_LANG_FIELD: self.lang,
            PAK_VERSION_HASH_FIELD: self.version_hash,
            PAK_STRINGS_FIELD: list(self.strings),
        }
