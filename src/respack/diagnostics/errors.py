"""respack exception hierarchy.

Every failure of the build-time tools and of table loading is reported as a
RespackError subclass carrying the offending path or name. Operating system
errors (unreadable or missing files) are not wrapped and propagate as OSError.

Hierarchy:
    RespackError
    ├─ DocumentError
    │  ├─ DocumentSyntaxError (malformed JSON)
    │  ├─ DocumentShapeError (valid JSON, unexpected structure)
    │  └─ UnsupportedFileTypeError (single file with the wrong extension)
    ├─ DeclarationError
    │  ├─ DeclarationSyntaxError (identifier module does not parse)
    │  └─ DeclarationValueError (constant without a usable value)
    ├─ InvalidNameError (name cannot be emitted as a constant)
    ├─ UnknownNameError (translation for a name without an identifier)
    ├─ LanguageMismatchError (table merged into another language)
    └─ UnknownLanguageError (lookup of a language never loaded)

Version hash mismatches are data integrity failures, see
respack.integrity.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "DeclarationError",
    "DeclarationSyntaxError",
    "DeclarationValueError",
    "DocumentError",
    "DocumentShapeError",
    "DocumentSyntaxError",
    "InvalidNameError",
    "LanguageMismatchError",
    "RespackError",
    "UnknownLanguageError",
    "UnknownNameError",
    "UnsupportedFileTypeError",
]


class RespackError(Exception):
    """Base exception for all respack errors.

    Attributes:
        path: File the error relates to (optional)
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        """Initialize RespackError.

        Args:
            message: Human-readable error description
            path: File the error relates to
        """
        super().__init__(message)
        self.path = path


class DocumentError(RespackError):
    """Translation document or packed table could not be used."""


class DocumentSyntaxError(DocumentError):
    """Document is not valid JSON."""


class DocumentShapeError(DocumentError):
    """Document is valid JSON but does not have the expected structure.

    Example:
        {"lang": "en", "strings": ["Hello"]}  <- strings must be an object
    """


class UnsupportedFileTypeError(DocumentError):
    """A single file given directly does not have the .json extension.

    Files with other extensions found while walking a directory are skipped
    silently instead.
    """


class DeclarationError(RespackError):
    """Identifier module could not be read."""


class DeclarationSyntaxError(DeclarationError):
    """Identifier module is not valid Python source.

    Attributes:
        lineno: Line of the syntax error (optional)
    """

    def __init__(
        self, message: str, *, path: str | None = None, lineno: int | None = None
    ) -> None:
        super().__init__(message, path=path)
        self.lineno = lineno


class DeclarationValueError(DeclarationError):
    """A selected constant has no resolvable value or a value of the wrong kind.

    Attributes:
        name: Name of the offending constant
    """

    def __init__(self, message: str, *, name: str, path: str | None = None) -> None:
        super().__init__(message, path=path)
        self.name = name


class InvalidNameError(RespackError):
    """Translation name cannot be emitted as a module-level constant.

    Names must be NFKC-normalized Python identifiers other than keywords,
    VERSION_HASH and _.

    Attributes:
        name: The rejected translation name
    """

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownNameError(RespackError):
    """Translation document contains a name with no assigned identifier.

    Usually a stale or mistyped key: regenerate the identifier module or fix
    the document.

    Attributes:
        name: The unknown translation name
    """

    def __init__(self, message: str, *, name: str, path: str | None = None) -> None:
        super().__init__(message, path=path)
        self.name = name


class LanguageMismatchError(RespackError):
    """Packed table for one language merged into another language.

    Attributes:
        expected: Language tag of the target
        actual: Language tag of the table
    """

    def __init__(self, message: str, *, expected: str, actual: str) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnknownLanguageError(RespackError, LookupError):
    """Language was never loaded into the domain.

    Attributes:
        name: The requested language tag
    """

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name
