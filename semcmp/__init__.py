"""
semcmp
Semantic Versioning 2.0.0 validation and precedence comparison.
"""

__version__ = "0.1.0"
__package_name__ = "semcmp"

from semcmp.core import (
    ComparisonResult,
    Identifier,
    IdentifierKind,
    InvalidFormat,
    ParsedVersion,
    compare,
    compare_versions,
    is_valid,
    parse,
)

__all__ = [
    "__version__",
    "__package_name__",
    "ComparisonResult",
    "Identifier",
    "IdentifierKind",
    "InvalidFormat",
    "ParsedVersion",
    "compare",
    "compare_versions",
    "is_valid",
    "parse",
]
