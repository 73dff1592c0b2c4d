"""Resource identifier assignment and version hashing.

Identifiers are the zero-based ranks of the translation names in sorted
order. The version hash fingerprints the sorted name list so that every
consumer of the identifiers (packed tables, runtime domains) can detect that
it was built against a different name set.

Both functions are deterministic: the same set of names, given in any order
and with any number of duplicates, yields the same identifiers and the same
hash on every platform.

Sort order is Python's default string ordering, i.e. by Unicode code point.
For UTF-8 encoded names this is the same order as byte-wise comparison.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from respack.constants import NAME_SEPARATOR

__all__ = [
    "assign_identifiers",
    "compute_version_hash",
    "sort_names",
]


def sort_names(names: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate and sort translation names.

    Example:
        >>> sort_names(["B", "A", "C", "A"])
        ('A', 'B', 'C')
    """
    return tuple(sorted(set(names)))


def assign_identifiers(names: Iterable[str]) -> dict[str, int]:
    """Map each name to its rank in sorted order.

    Example:
        >>> assign_identifiers(["B", "A", "C"])
        {'A': 0, 'B': 1, 'C': 2}
    """
    return {name: index for index, name in enumerate(sort_names(names))}


def compute_version_hash(names: Iterable[str]) -> str:
    """Compute the version hash of a set of names.

    SHA-1 over the UTF-8 bytes of the sorted names joined by commas,
    hex-encoded in lowercase. This is a drift detector, not a security
    boundary: two sets with equal hashes are assumed identical.

    Returns:
        40-character lowercase hex digest

    Example:
        >>> compute_version_hash(["C", "A", "B"]) == compute_version_hash(["A", "B", "C"])
        True
    """
    joined = NAME_SEPARATOR.join(sort_names(names))
    return hashlib.sha1(joined.encode("utf-8"), usedforsecurity=False).hexdigest()
