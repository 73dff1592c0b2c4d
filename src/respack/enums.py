"""Enumerations for respack type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TypeTag(StrEnum):
    """Declared type of a constant in an identifier module.

    StrEnum provides automatic string conversion: str(TypeTag.INT) == "int"
    """

    INT = "int"
    """Integer constant: Greeting: Final[int] = 0"""

    STR = "str"
    """String constant: VERSION_HASH: Final[str] = "..." """

    UNTYPED = "untyped"
    """No annotation, or a bare Final: VERSION_HASH = "..." """

    OTHER = "other"
    """Any other annotation: ratio: float = 0.5"""


class LoadStatus(StrEnum):
    """Outcome of loading one packed table file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Table read and merged into its language."""

    NOT_FOUND = "not_found"
    """File does not exist."""

    ERROR = "error"
    """File unreadable, malformed, or rejected by a compatibility check."""


__all__ = [
    "LoadStatus",
    "TypeTag",
]
