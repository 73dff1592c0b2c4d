"""Hypothesis strategies for respack property-based testing.

Strategies are organized by domain:

- names: translation names accepted by the identifier module generator
- tables: translation documents and packed tables

Usage:
    from tests.strategies import translation_names, name_sets
    from tests.strategies.tables import packed_tables

Event-Emitting Strategies (HypoFuzz-Optimized):
    - translation_names: Emits name_kind=ascii|unicode
    - name_sets: Emits name_set_size=empty|small|large
    - strings_documents: Emits doc_coverage=full|partial|empty
    - packed_tables: Emits table_gaps=none|some|all
"""

from .names import name_sets, translation_names
from .tables import packed_tables, strings_documents

__all__ = [
    "name_sets",
    "packed_tables",
    "strings_documents",
    "translation_names",
]
