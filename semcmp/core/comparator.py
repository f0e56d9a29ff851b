"""
Comparator
SemVer 2.0.0 precedence between two parsed versions.
"""

from enum import IntEnum
from itertools import zip_longest
from typing import Sequence, Tuple

from semcmp.core.errors import InvalidFormat
from semcmp.core.parser import Identifier, ParsedVersion, parse


class ComparisonResult(IntEnum):
    """Three-way ordering result, printable as -1 / 0 / 1."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reversed(self) -> "ComparisonResult":
        return ComparisonResult(-self.value)

    def __str__(self) -> str:
        return str(self.value)


def _compare_values(a, b) -> ComparisonResult:
    if a < b:
        return ComparisonResult.LESS
    if a > b:
        return ComparisonResult.GREATER
    return ComparisonResult.EQUAL


def compare_identifiers(a: Identifier, b: Identifier) -> ComparisonResult:
    """
    Compare two pre-release identifiers.

    Numeric identifiers compare as integers and always rank below
    alphanumeric ones; alphanumeric identifiers compare by code point.
    """
    if a.is_numeric and b.is_numeric:
        return _compare_values(a.number, b.number)
    if a.is_numeric:
        return ComparisonResult.LESS
    if b.is_numeric:
        return ComparisonResult.GREATER
    return _compare_values(a.text, b.text)


def compare_prerelease(a: Sequence[Identifier], b: Sequence[Identifier]) -> ComparisonResult:
    """
    Compare two non-empty pre-release sequences identifier by identifier.

    When one sequence is a prefix of the other, the shorter one is LESS.
    """
    for left, right in zip_longest(a, b):
        if left is None:
            return ComparisonResult.LESS
        if right is None:
            return ComparisonResult.GREATER
        result = compare_identifiers(left, right)
        if result is not ComparisonResult.EQUAL:
            return result
    return ComparisonResult.EQUAL


def compare(a: ParsedVersion, b: ParsedVersion) -> ComparisonResult:
    """
    Return the precedence of a relative to b.

    Order of checks:
    1. major, minor, patch as integers
    2. a pre-release ranks below the same release without one
    3. pre-release identifiers, left to right

    Build metadata is never consulted.
    """
    result = _compare_values(a.core, b.core)
    if result is not ComparisonResult.EQUAL:
        return result

    if not a.prerelease and not b.prerelease:
        return ComparisonResult.EQUAL
    if not a.prerelease:
        return ComparisonResult.GREATER
    if not b.prerelease:
        return ComparisonResult.LESS

    return compare_prerelease(a.prerelease, b.prerelease)


def compare_versions(a: str, b: str, labels: Tuple[str, str] = ("first", "second")) -> ComparisonResult:
    """
    Parse two raw strings and compare them.

    Inputs are parsed in order and the first invalid one is reported.

    Args:
        a: First version string
        b: Second version string
        labels: Names used to tag a rejected input

    Raises:
        InvalidFormat: with `argument` set to the label of the rejected input
    """
    parsed = []
    for name, raw in zip(labels, (a, b)):
        try:
            parsed.append(parse(raw))
        except InvalidFormat as e:
            raise e.for_argument(name) from e
    return compare(parsed[0], parsed[1])
