"""Data integrity exceptions for identifier/table compatibility.

A version hash mismatch means a packed table was generated against a
different set of resource identifiers than the one in use. Merging it would
show the wrong string for an identifier, so these errors are never
recovered from silently: they reject the load and carry the evidence.

Design:
    - Subclasses RespackError so one except clause covers every failure
    - Carry an IntegrityContext for diagnosis (expected vs. actual hash)
    - Immutable after construction
    - @final decorator prevents subclassing of concrete errors

Hierarchy:
    DataIntegrityError (base)
    ├─ VersionHashMismatchError (table/identifier drift)
    └─ ImmutabilityViolationError (mutation attempt on an integrity error)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from respack.diagnostics import RespackError

__all__ = [
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "VersionHashMismatchError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Where an integrity check failed and what it compared.

    Attributes:
        component: Component where the check failed (language, domain, resid)
        operation: Operation being performed (add_table, verify)
        key: Language tag or file involved (optional)
        expected: Version hash required by the target (optional)
        actual: Version hash found on the incoming data (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(RespackError):
    """Base exception for identifier/table integrity failures.

    Attributes are fixed at construction: assigning or deleting one raises
    ImmutabilityViolationError.

    Attributes:
        context: Structured diagnostic context
    """

    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        path: str | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            path: File the error relates to (optional)
        """
        super().__init__(message, path=path)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject attribute mutations after initialization.

        Python's exception machinery must still be able to set traceback and
        chaining attributes during propagation.

        Raises:
            ImmutabilityViolationError: If the error is already constructed
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"attribute '{name}' of {type(self).__name__} is read-only"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject attribute deletion.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"attribute '{name}' of {type(self).__name__} cannot be deleted"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Context recorded when the error was raised."""
        return self._context  # type: ignore[attr-defined,no-any-return]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self.context!r})"


@final
class VersionHashMismatchError(DataIntegrityError):
    """Packed table or identifier set does not match the required version hash.

    Raised when:
        - a table is merged into a language bound to another hash
        - a table is loaded into a domain constrained to another hash
        - an identifier module's VERSION_HASH does not match its own names

    The target is left unchanged when this is raised.
    """

    @property
    def expected(self) -> str | None:
        """Version hash required by the target."""
        return self.context.expected if self.context is not None else None

    @property
    def actual(self) -> str | None:
        """Version hash carried by the rejected data."""
        return self.context.actual if self.context is not None else None


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an integrity error after construction."""
