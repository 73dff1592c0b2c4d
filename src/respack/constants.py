"""Shared constants for respack.

Centralizes the file-naming conventions and generated-code markers shared by
the collector, the code generator, the packer and the command-line tools.

Constants are grouped by domain:
- Files: recognized extensions, hidden-entry marker, output naming
- Declarations: names the generated identifier module relies on
- Wire format: JSON field names of documents and packed tables

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Files
    "JSON_EXTENSION",
    "PACK_SUFFIX",
    "HIDDEN_PREFIX",
    "PYTHON_EXTENSION",
    "DEFAULT_RESID_FILE",
    "RESID_SUFFIX",
    # Declarations
    "VERSION_HASH_NAME",
    "BLANK_NAME",
    "GENERATED_HEADER",
    "MAX_EXPRESSION_DEPTH",
    # Wire format
    "DOC_LANG_FIELD",
    "DOC_STRINGS_FIELD",
    "PAK_LANG_FIELD",
    "PAK_VERSION_HASH_FIELD",
    "PAK_STRINGS_FIELD",
    "NAME_SEPARATOR",
]

# ============================================================================
# FILES
# ============================================================================

# Only files with this extension are treated as translation documents.
JSON_EXTENSION: str = ".json"

# Packed tables are written next to their source: en.json -> en.pak.json
PACK_SUFFIX: str = ".pak"

# Directory entries starting with this marker are skipped during traversal.
HIDDEN_PREFIX: str = "."

PYTHON_EXTENSION: str = ".py"

# Output of respack-genids when neither --output nor --anchor is given,
# and the identifier module respack-pack reads by default.
DEFAULT_RESID_FILE: str = "resid.py"

# Anchor file foo.py generates foo_resid.py
RESID_SUFFIX: str = "_resid"

# ============================================================================
# DECLARATIONS
# ============================================================================

# Name of the string constant holding the version hash in generated modules.
VERSION_HASH_NAME: str = "VERSION_HASH"

# Placeholder name; never treated as a resource identifier.
BLANK_NAME: str = "_"

# First line of every generated module. Format with command=...
GENERATED_HEADER: str = '# Code generated by "{command}"; DO NOT EDIT.'

# Nesting limit of constant expressions evaluated when reading identifier
# modules back; deeper expressions are treated as having no value.
MAX_EXPRESSION_DEPTH: int = 100

# ============================================================================
# WIRE FORMAT
# ============================================================================

# Authoring document: {"lang": "en", "strings": {"Greeting": "Hello"}}
DOC_LANG_FIELD: str = "lang"
DOC_STRINGS_FIELD: str = "strings"

# Packed table: {"Lang": "en", "VersionHash": "...", "Strings": ["Hello"]}
PAK_LANG_FIELD: str = "Lang"
PAK_VERSION_HASH_FIELD: str = "VersionHash"
PAK_STRINGS_FIELD: str = "Strings"

# Separator between sorted names when computing the version hash.
NAME_SEPARATOR: str = ","
