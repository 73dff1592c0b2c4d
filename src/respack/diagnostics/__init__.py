"""Error types for respack.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    DeclarationError,
    DeclarationSyntaxError,
    DeclarationValueError,
    DocumentError,
    DocumentShapeError,
    DocumentSyntaxError,
    InvalidNameError,
    LanguageMismatchError,
    RespackError,
    UnknownLanguageError,
    UnknownNameError,
    UnsupportedFileTypeError,
)

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
