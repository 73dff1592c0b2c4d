"""respack runtime package.

Loads packed string tables and resolves resource identifiers to strings.
Depends only on the model and loading layers; nothing here touches the
build-time collector, code generator or packer.

Python 3.13+.
"""

from .domain import Domain
from .language import Language

__all__ = [
    "Domain",
    "Language",
]
