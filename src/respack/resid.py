"""Resource identifier sets read back from identifier modules.

ResourceIDSet is what the packer needs from a previously generated
identifier module: the version hash and the name -> identifier mapping.
Extraction is tolerant: declarations that do not look like resource
identifiers or like the version hash are ignored, so the module may contain
unrelated code. Declarations that do look like them but carry no usable
value are errors.

Values are trusted as declared. The generator assigns them sequentially in
sorted name order; verify() re-checks that, together with the version hash,
for callers that do not want to rely on the module being untouched.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from respack.constants import BLANK_NAME, VERSION_HASH_NAME
from respack.declarations import Declaration, parse_declaration_path
from respack.diagnostics import DeclarationValueError
from respack.enums import TypeTag
from respack.identifiers import compute_version_hash, sort_names
from respack.integrity import IntegrityContext, VersionHashMismatchError
from respack.loading import StrPath

__all__ = ["ResourceIDSet"]

logger = logging.getLogger(__name__)

_HASH_TAGS = frozenset((TypeTag.STR, TypeTag.UNTYPED))


def _version_hash_value(decl: Declaration) -> str:
    if not decl.has_value:
        msg = f"no value for constant '{decl.name}'"
        raise DeclarationValueError(msg, name=decl.name, path=decl.path)
    if not isinstance(decl.value, str):
        msg = f"value of constant '{decl.name}' is not a string"
        raise DeclarationValueError(msg, name=decl.name, path=decl.path)
    return decl.value


def _check_identifier(name: str, value: object, path: str | None = None) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        msg = f"value of constant '{name}' is not a non-negative integer"
        raise DeclarationValueError(msg, name=name, path=path)
    return value


def _identifier_value(decl: Declaration) -> int:
    if not decl.has_value:
        msg = f"no value for constant '{decl.name}'"
        raise DeclarationValueError(msg, name=decl.name, path=decl.path)
    return _check_identifier(decl.name, decl.value, decl.path)


@dataclass(frozen=True, slots=True)
class ResourceIDSet:
    """Set of resource identifiers.

    Attributes:
        version_hash: VERSION_HASH value of the identifier module ("" if absent)
        names: Read-only mapping of translation name to numeric identifier

    Construction raises DeclarationValueError if an identifier is not a
    non-negative integer.

    Example:
        >>> ids = ResourceIDSet.load("resid.py")
        >>> ids.names["Greeting"]
        0
        >>> ids.max_id()
        1
    """

    version_hash: str = ""
    names: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        names = {name: _check_identifier(name, value) for name, value in self.names.items()}
        object.__setattr__(self, "names", MappingProxyType(names))

    @classmethod
    def from_declarations(cls, declarations: Iterable[Declaration]) -> ResourceIDSet:
        """Select the version hash and resource identifiers from declarations.

        - VERSION_HASH declared as str or without a type is the version hash;
          with any other type it is ignored.
        - Every other constant declared as int (except _) is a resource
          identifier.
        - Everything else is ignored.

        Raises:
            DeclarationValueError: If a selected constant has no value, the
                version hash is not a string, or an identifier is not a
                non-negative integer
        """
        version_hash = ""
        names: dict[str, int] = {}
        for decl in declarations:
            if decl.name == VERSION_HASH_NAME:
                if decl.type_tag in _HASH_TAGS:
                    version_hash = _version_hash_value(decl)
                continue
            if decl.type_tag != TypeTag.INT or decl.name == BLANK_NAME:
                continue
            names[decl.name] = _identifier_value(decl)
        return cls(version_hash=version_hash, names=names)

    @classmethod
    def load(cls, path: StrPath) -> ResourceIDSet:
        """Read the identifiers declared in a module file or package directory.

        Raises:
            OSError: If the source cannot be read
            DeclarationSyntaxError: If the source is not valid Python
            DeclarationValueError: See from_declarations()
        """
        ids = cls.from_declarations(parse_declaration_path(path))
        logger.info(
            "Loaded %d resource identifiers from %s (version hash %s)",
            len(ids.names),
            os.fspath(path),
            ids.version_hash or "<none>",
        )
        return ids

    def max_id(self) -> int:
        """Highest identifier in the set, 0 if the set is empty."""
        return max(self.names.values(), default=0)

    def __len__(self) -> int:
        return len(self.names)

    def verify(self) -> None:
        """Re-validate the set against the identifier assignment rules.

        Checks that the identifiers are exactly 0..N-1 in sorted name order
        and, when a version hash is declared, that it matches the names.

        Raises:
            DeclarationValueError: If an identifier differs from its name's rank
            VersionHashMismatchError: If the declared version hash does not
                match the declared names
        """
        for expected, name in enumerate(sort_names(self.names)):
            if self.names[name] != expected:
                msg = (
                    f"constant '{name}' has value {self.names[name]}, "
                    f"expected {expected} from its sorted position"
                )
                raise DeclarationValueError(msg, name=name)
        if not self.version_hash:
            return
        computed = compute_version_hash(self.names)
        if computed != self.version_hash:
            msg = "version hash does not match the declared resource identifiers"
            raise VersionHashMismatchError(
                msg,
                IntegrityContext(
                    component="resid",
                    operation="verify",
                    key=VERSION_HASH_NAME,
                    expected=self.version_hash,
                    actual=computed,
                ),
            )
