"""Data models for version ranges, operators and the requirement parse tree."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from ..constants import Constants
from .version import (
    MAX_VERSION,
    MIN_VERSION,
    Version,
    equivalent_to,
    newer_than,
    older_than,
)


@dataclass(frozen=True)
class VersionRange:
    """An interval of versions with independently inclusive/exclusive bounds."""

    min: Version
    max: Version
    min_inclusive: bool = True
    max_inclusive: bool = True

    MATCH_ALL: ClassVar["VersionRange"]
    MATCH_NONE: ClassVar["VersionRange"]

    def contains(self, version: Version) -> bool:
        """Return True if version equals an inclusive bound or lies strictly inside."""
        if self.min_inclusive and equivalent_to(version, self.min):
            return True
        if self.max_inclusive and equivalent_to(version, self.max):
            return True
        return newer_than(version, self.min) and older_than(version, self.max)

    def __str__(self) -> str:
        return "%s%s, %s%s" % (
            "[" if self.min_inclusive else "(",
            self.min,
            self.max,
            "]" if self.max_inclusive else ")",
        )


VersionRange.MATCH_ALL = VersionRange(min=MIN_VERSION, max=MAX_VERSION, min_inclusive=True, max_inclusive=True)
VersionRange.MATCH_NONE = VersionRange(min=MAX_VERSION, max=MIN_VERSION, min_inclusive=False, max_inclusive=False)


class Operator(Enum):
    """Comparison operators allowed in front of a version literal."""
    EQ = "="
    GT = ">"
    LT = "<"
    GTEQ = ">="
    LTEQ = "<="
    TILDE = "~"
    CARET = "^"


def operator_for(text: Optional[str]) -> Tuple[Optional[Operator], Optional[str]]:
    """Map an operator token to an Operator.

    A missing token is implicit equality. Returns (operator, None) on success and
    (None, text) when the token is not a known operator.
    """
    if text is None or not text.strip():
        return Operator.EQ, None
    name = Constants.OPERATORS.get(text.strip().upper())
    if name is None:
        return None, text
    return Operator[name], None


@dataclass(frozen=True)
class VersionLiteral:
    """A version as written in a requirement; fields hold the raw token texts."""
    major: str
    minor: Optional[str] = None
    patch: Optional[str] = None
    pre_release: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()
    text: str = ""

    @property
    def pre_release_text(self) -> Optional[str]:
        return ".".join(self.pre_release) if self.pre_release else None

    def without_pre_release(self) -> "VersionLiteral":
        """Return a copy of this literal without its pre-release segment."""
        text = ".".join(p for p in (self.major, self.minor, self.patch) if p is not None)
        return VersionLiteral(self.major, self.minor, self.patch, (), self.build, text)

    def __str__(self) -> str:
        return self.text or ".".join(p for p in (self.major, self.minor, self.patch) if p is not None)


@dataclass(frozen=True)
class OperatorClauseNode:
    """An optional operator token followed by one version literal."""
    operator: Optional[str]
    version: VersionLiteral


@dataclass(frozen=True)
class DashClauseNode:
    """An explicit ``A - B`` range."""
    lower: VersionLiteral
    upper: VersionLiteral


@dataclass(frozen=True)
class IntersectionNode:
    """One ``||``-delimited group of whitespace-separated clauses."""
    operator_clauses: Tuple[OperatorClauseNode, ...] = ()
    dash_clauses: Tuple[DashClauseNode, ...] = ()


@dataclass(frozen=True)
class UnionNode:
    """Root of the parse tree."""
    intersections: Tuple[IntersectionNode, ...] = ()
