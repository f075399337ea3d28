"""npm range compilation: grammar, bounds, clauses and requirements."""

from .clauses import Clause, ClauseKind, compile_dash_clause, compile_operator_clause
from .models import Operator, VersionLiteral, VersionRange, operator_for
from .parser import RequirementParser, is_valid_partial_version, parse_requirement, parse_version_literal
from .requirement import Intersection, NpmVersionRequirement, Union, satisfies
from .version import MAX_VERSION, MIN_VERSION, Version, to_version

__all__ = [
    "Clause",
    "ClauseKind",
    "compile_dash_clause",
    "compile_operator_clause",
    "Operator",
    "VersionLiteral",
    "VersionRange",
    "operator_for",
    "RequirementParser",
    "is_valid_partial_version",
    "parse_requirement",
    "parse_version_literal",
    "Intersection",
    "NpmVersionRequirement",
    "Union",
    "satisfies",
    "MAX_VERSION",
    "MIN_VERSION",
    "Version",
    "to_version",
]
