"""
Core Module
SemVer 2.0.0 parsing and precedence comparison.
"""

from .errors import InvalidFormat
from .parser import Identifier, IdentifierKind, ParsedVersion, parse, is_valid
from .comparator import (
    ComparisonResult,
    compare,
    compare_identifiers,
    compare_prerelease,
    compare_versions,
)

__all__ = [
    "InvalidFormat",
    # Parser
    "Identifier",
    "IdentifierKind",
    "ParsedVersion",
    "parse",
    "is_valid",
    # Comparator
    "ComparisonResult",
    "compare",
    "compare_identifiers",
    "compare_prerelease",
    "compare_versions",
]
