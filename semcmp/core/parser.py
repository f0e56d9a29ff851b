"""
Parser
Validate strings against the SemVer 2.0.0 grammar and decompose them.

The input is split on its delimiters first ("+" for build metadata, the first
"-" for the pre-release, "." inside each section), then every piece is matched
against its own anchored pattern. This accepts exactly the language of the
canonical SemVer regular expression while letting a rejection say which part
was wrong.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from semcmp.core.errors import InvalidFormat

logger = logging.getLogger(__name__)


NUMERIC_ID = re.compile(r"0|[1-9][0-9]*")
DIGITS = re.compile(r"[0-9]+")
ALPHANUMERIC_ID = re.compile(r"[0-9A-Za-z-]*[A-Za-z-][0-9A-Za-z-]*")
BUILD_ID = re.compile(r"[0-9A-Za-z-]+")

CORE_FIELDS = ("major", "minor", "patch")


class IdentifierKind(Enum):
    """Kind of a pre-release identifier, fixed at parse time."""
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


def _classify(text: str) -> IdentifierKind:
    """Return the kind of a pre-release identifier or raise InvalidFormat."""
    if DIGITS.fullmatch(text):
        if not NUMERIC_ID.fullmatch(text):
            raise InvalidFormat(text, "leading zero in pre-release identifier")
        return IdentifierKind.NUMERIC
    if ALPHANUMERIC_ID.fullmatch(text):
        return IdentifierKind.ALPHANUMERIC
    raise InvalidFormat(text, "invalid character in pre-release identifier")


@dataclass(frozen=True)
class Identifier:
    """
    One dot-separated pre-release identifier.

    `kind` must agree with `text`; `number` is derived from `text` for
    numeric identifiers and is None otherwise.
    """
    text: str
    kind: IdentifierKind
    number: Optional[int] = field(default=None, init=False)

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"identifier text must be str, got {type(self.text).__name__}")
        actual = _classify(self.text)
        if self.kind is not actual:
            claimed = getattr(self.kind, "value", self.kind)
            raise InvalidFormat(self.text, f"identifier is {actual.value}, not {claimed}")
        if actual is IdentifierKind.NUMERIC:
            object.__setattr__(self, "number", int(self.text))

    @property
    def is_numeric(self) -> bool:
        return self.kind is IdentifierKind.NUMERIC

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ParsedVersion:
    """
    Decomposed form of a valid version string.

    Direct construction is checked against the same rules `parse` applies,
    so every instance is safe to hand to `compare`.
    """
    major: int
    minor: int
    patch: int
    prerelease: Tuple[Identifier, ...] = ()
    build: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in CORE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
            if value < 0:
                raise InvalidFormat(value, f"negative {name}")

        if isinstance(self.prerelease, str) or isinstance(self.build, str):
            raise TypeError("prerelease and build must be sequences, not str")
        prerelease = tuple(self.prerelease)
        for ident in prerelease:
            if not isinstance(ident, Identifier):
                raise TypeError(f"prerelease items must be Identifier, got {type(ident).__name__}")
        build = tuple(self.build)
        for text in build:
            if not isinstance(text, str) or not BUILD_ID.fullmatch(text):
                raise InvalidFormat(text, "invalid build identifier")
        object.__setattr__(self, "prerelease", prerelease)
        object.__setattr__(self, "build", build)

    @classmethod
    def parse(cls, raw: str) -> "ParsedVersion":
        return parse(raw)

    @property
    def core(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def prerelease_text(self) -> str:
        return ".".join(ident.text for ident in self.prerelease)

    @property
    def build_text(self) -> str:
        return ".".join(self.build)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + self.prerelease_text
        if self.build:
            text += "+" + self.build_text
        return text


def _split_section(section: str, name: str, raw: str) -> Tuple[str, ...]:
    if not section:
        raise InvalidFormat(raw, f"empty {name}")
    parts = tuple(section.split("."))
    if any(not part for part in parts):
        raise InvalidFormat(raw, f"empty {name} identifier")
    return parts


def _parse_core(core: str, raw: str) -> Tuple[int, int, int]:
    parts = core.split(".")
    if len(parts) != 3:
        raise InvalidFormat(raw, "expected MAJOR.MINOR.PATCH")

    numbers = []
    for name, part in zip(CORE_FIELDS, parts):
        if not part:
            raise InvalidFormat(raw, f"empty {name}")
        if not DIGITS.fullmatch(part):
            raise InvalidFormat(raw, f"non-numeric {name}")
        if not NUMERIC_ID.fullmatch(part):
            raise InvalidFormat(raw, f"leading zero in {name}")
        numbers.append(int(part))
    return numbers[0], numbers[1], numbers[2]


def _parse_prerelease_identifier(text: str, raw: str) -> Identifier:
    try:
        return Identifier(text, _classify(text))
    except InvalidFormat as e:
        raise InvalidFormat(raw, f"{e.reason} {text!r}") from None


def _parse_build_identifier(text: str, raw: str) -> str:
    if not BUILD_ID.fullmatch(text):
        raise InvalidFormat(raw, f"invalid character in build identifier {text!r}")
    return text


def _decompose(raw: str) -> ParsedVersion:
    # Neither the core nor the pre-release may contain "+", and the core may
    # not contain "-", so the first occurrence of each is the delimiter.
    rest, plus, build_section = raw.partition("+")
    core, dash, prerelease_section = rest.partition("-")

    major, minor, patch = _parse_core(core, raw)

    prerelease: Tuple[Identifier, ...] = ()
    if dash:
        prerelease = tuple(
            _parse_prerelease_identifier(text, raw)
            for text in _split_section(prerelease_section, "pre-release", raw)
        )

    build: Tuple[str, ...] = ()
    if plus:
        build = tuple(
            _parse_build_identifier(text, raw)
            for text in _split_section(build_section, "build metadata", raw)
        )

    return ParsedVersion(major, minor, patch, prerelease, build)


def parse(raw: str) -> ParsedVersion:
    """
    Parse a SemVer 2.0.0 string into a ParsedVersion.

    The match is anchored at both ends and nothing is trimmed, so surrounding
    whitespace is rejected like any other stray character.

    Raises:
        InvalidFormat: if raw is not a string or does not match the grammar
    """
    if not isinstance(raw, str):
        raise InvalidFormat(raw, f"expected str, got {type(raw).__name__}")
    try:
        return _decompose(raw)
    except InvalidFormat as e:
        logger.debug(f"Rejected version {raw!r}: {e.reason}")
        raise


def is_valid(raw: str) -> bool:
    """Return True if raw is a valid SemVer 2.0.0 string."""
    try:
        parse(raw)
    except InvalidFormat:
        return False
    return True
