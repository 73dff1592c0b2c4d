"""Language tag utilities backed by Babel's CLDR data.

Packed tables are keyed by whatever language tag their source document
declares; respack never rejects a tag. These helpers let the build tools
normalize tags and warn about tags CLDR does not know, which are usually
typos that would otherwise surface only as an unknown language at
runtime.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 tag to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether CLDR knows a language tag.

    Unknown or malformed tags are logged at WARNING and reported as False;
    this never raises.

    Example:
        >>> is_known_locale("et")
        True
        >>> is_known_locale("xx")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        logger.warning("Empty language tag")
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.warning("Unknown language tag '%s': %s", locale_code, e)
        return False
    return True
