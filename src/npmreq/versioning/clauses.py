"""Compilation of parsed clauses into Clause values.

A Clause is a tagged value: its kind, the VersionRange computed once at
compile time and two flags that carry npm's pre-release exceptions. All
satisfaction checks go through Clause.is_satisfied_by.

    kind              range               flags
    EQUAL             [min, max)
    GREATER_THAN      (min, MAX]
    GREATER_OR_EQUAL  [min, MAX]
    LESS_THAN         [MIN, min)
    LESS_OR_EQUAL     [MIN, min]
    TILDE             [min, tilde_upper)  same_base_prerelease
    CARET             [min, caret_upper)  same_base_prerelease
    DASH              [min(A), max(B)]    release_only
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .bounds import (
    BoundResult,
    is_any_version,
    is_wildcard,
    make_version,
    max_for,
    min_for,
    numeric_fields,
    validate,
)
from .models import (
    DashClauseNode,
    Operator,
    OperatorClauseNode,
    VersionLiteral,
    VersionRange,
    operator_for,
)
from .version import MAX_VERSION, MIN_VERSION, Version, is_tagged, same_base


class ClauseKind(Enum):
    """Kinds of compiled clauses."""
    EQUAL = "equal"
    LESS_THAN = "less_than"
    LESS_OR_EQUAL = "less_or_equal"
    GREATER_THAN = "greater_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    TILDE = "tilde"
    CARET = "caret"
    DASH = "dash"


_KIND_FOR_OPERATOR = {
    Operator.EQ: ClauseKind.EQUAL,
    Operator.LT: ClauseKind.LESS_THAN,
    Operator.LTEQ: ClauseKind.LESS_OR_EQUAL,
    Operator.GT: ClauseKind.GREATER_THAN,
    Operator.GTEQ: ClauseKind.GREATER_OR_EQUAL,
    Operator.TILDE: ClauseKind.TILDE,
    Operator.CARET: ClauseKind.CARET,
}

# ``>*`` and ``<*`` can never be met; every other operator on ``*`` matches all.
_NEVER_FOR_ANY_VERSION = (ClauseKind.GREATER_THAN, ClauseKind.LESS_THAN)


@dataclass(frozen=True)
class Clause:
    """One compiled comparator.

    Attributes:
        kind: Which operator produced the clause.
        range: Interval computed at compile time.
        same_base_prerelease: A pre-release candidate must share the range
            minimum's major.minor.patch (tilde and caret).
        release_only: Candidates with pre-release or build identifiers never
            match (dash ranges).
    """

    kind: ClauseKind
    range: VersionRange
    same_base_prerelease: bool = False
    release_only: bool = False

    def is_satisfied_by(self, version: Version) -> bool:
        if self.release_only and is_tagged(version):
            return False
        if self.same_base_prerelease and version.prerelease and not same_base(version, self.range.min):
            return False
        return self.range.contains(version)

    def __str__(self) -> str:
        return "%s %s" % (self.kind.value, self.range)


ClauseResult = Tuple[Optional[Clause], Optional[str]]


def tilde_upper(literal: VersionLiteral) -> BoundResult:
    """Exclusive upper bound of a tilde range.

    Minor wildcard with a concrete patch never reaches here (validate rejects it).
    """
    major, minor, _ = numeric_fields(literal)
    if is_wildcard(literal.minor):
        # ~1 := <2.0.0, ~0 := <1.0.0
        return make_version(major + 1, 0, 0, fragment=str(literal))
    # ~1.2 := <1.3.0, ~1.2.3 := <1.3.0, ~0.2.3 := <0.3.0, ~1.0.3 := <1.1.0
    return make_version(major, minor + 1, 0, fragment=str(literal))


def caret_upper(literal: VersionLiteral) -> BoundResult:
    """Exclusive upper bound of a caret range: the left-most non-zero field is bumped."""
    major, minor, patch = numeric_fields(literal)
    if major > 0:
        # ^1.2.3, ^1.2.x, ^1.x := <2.0.0
        return make_version(major + 1, 0, 0, fragment=str(literal))
    if is_wildcard(literal.minor):
        # ^0, ^0.x := <1.0.0
        return make_version(1, 0, 0, fragment=str(literal))
    if minor > 0:
        # ^0.2.3, ^0.2.x := <0.3.0
        return make_version(0, minor + 1, 0, fragment=str(literal))
    if is_wildcard(literal.patch):
        # ^0.0, ^0.0.x := <0.1.0
        return make_version(0, 1, 0, fragment=str(literal))
    # ^0.0.3 := <0.0.4
    return make_version(0, 0, patch + 1, fragment=str(literal))


def compile_operator_clause(node: OperatorClauseNode) -> ClauseResult:
    """Compile an operator clause (``^1.2.3``, ``<2``, ``1.x`` ...)."""
    operator, error = operator_for(node.operator)
    if error:
        return None, error
    kind = _KIND_FOR_OPERATOR[operator]
    literal = node.version

    error = validate(literal)
    if error:
        return None, error
    if is_any_version(literal):
        if kind in _NEVER_FOR_ANY_VERSION:
            return Clause(kind, VersionRange.MATCH_NONE), None
        return Clause(kind, VersionRange.MATCH_ALL), None

    low, error = min_for(literal)
    if error:
        return None, error

    if kind == ClauseKind.GREATER_THAN:
        return Clause(kind, VersionRange(low, MAX_VERSION, min_inclusive=False, max_inclusive=True)), None
    if kind == ClauseKind.GREATER_OR_EQUAL:
        return Clause(kind, VersionRange(low, MAX_VERSION, min_inclusive=True, max_inclusive=True)), None
    if kind == ClauseKind.LESS_THAN:
        return Clause(kind, VersionRange(MIN_VERSION, low, min_inclusive=True, max_inclusive=False)), None
    if kind == ClauseKind.LESS_OR_EQUAL:
        return Clause(kind, VersionRange(MIN_VERSION, low, min_inclusive=True, max_inclusive=True)), None

    if kind == ClauseKind.TILDE:
        high, error = tilde_upper(literal)
    elif kind == ClauseKind.CARET:
        high, error = caret_upper(literal)
    else:
        high, error = max_for(literal)
    if error:
        return None, error

    same_base_prerelease = kind in (ClauseKind.TILDE, ClauseKind.CARET)
    bounds = VersionRange(low, high, min_inclusive=True, max_inclusive=False)
    return Clause(kind, bounds, same_base_prerelease=same_base_prerelease), None


def compile_dash_clause(node: DashClauseNode) -> ClauseResult:
    """Compile ``A - B`` into an inclusive range that rejects tagged versions."""
    low, error = min_for(node.lower)
    if error:
        return None, error
    high, error = max_for(node.upper)
    if error:
        return None, error
    bounds = VersionRange(low, high, min_inclusive=True, max_inclusive=True)
    return Clause(ClauseKind.DASH, bounds, release_only=True), None
