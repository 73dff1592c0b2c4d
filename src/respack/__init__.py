"""respack - compile-time string resource packing with versioned identifiers.

Build time:
    NameSet collects translation names from JSON documents, the code
    generator writes them as a Python module of integer constants plus a
    VERSION_HASH, and the packer lays each language's translations out as a
    dense list indexed by those constants.

Run time:
    Domain loads the packed lists and resolves constants to strings,
    rejecting any list packed against a different VERSION_HASH.

Public API:
    NameSet - Translation name collection
    ResourceIDSet - Identifiers read back from a generated module
    pack_strings / pack_file - Packing of translation documents
    Domain / Language - Runtime lookup
    StringsData / PackedStringsData - Document and table structures
    compute_version_hash - Version hash of a name set

Exceptions:
    RespackError - Base exception class
    VersionHashMismatchError - Identifier/table drift

Submodules:
    respack.declarations - Constant extraction from Python source
    respack.codegen - Identifier module generation
    respack.loading - JSON file access and load summaries
    respack.cli - respack-genids and respack-pack entry points
"""

from .collector import NameSet
from .diagnostics import RespackError
from .identifiers import assign_identifiers, compute_version_hash
from .integrity import VersionHashMismatchError
from .model import PackedStringsData, StringsData
from .packer import pack_file, pack_strings
from .resid import ResourceIDSet
from .runtime import Domain, Language

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("respack")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Domain",
    "Language",
    "NameSet",
    "PackedStringsData",
    "RespackError",
    "ResourceIDSet",
    "StringsData",
    "VersionHashMismatchError",
    "__version__",
    "assign_identifiers",
    "compute_version_hash",
    "pack_file",
    "pack_strings",
]
