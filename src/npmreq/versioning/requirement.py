"""Compiled npm version requirements.

    >>> req = NpmVersionRequirement("1.x || >=8.5.0 || 5.0.0 - 7.2.3")
    >>> req.is_satisfied_by("5.1.0")
    True
    >>> "7.3.0" in req
    False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union as TypingUnion

from ..common.logging_utils import Timer, extra_context, is_debug_enabled
from ..errors import InvalidRequirementFormatError
from .clauses import Clause, compile_dash_clause, compile_operator_clause
from .dash import resolve_dash
from .models import IntersectionNode
from .parser import parse_requirement
from .version import Version, to_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Intersection:
    """AND group: satisfied when every clause is. An empty group places no constraint."""

    clauses: Tuple[Clause, ...] = ()

    def is_satisfied_by(self, version: Version) -> bool:
        return all(clause.is_satisfied_by(version) for clause in self.clauses)


@dataclass(frozen=True)
class Union:
    """OR of intersections: satisfied when any group is. An empty union matches nothing."""

    groups: Tuple[Intersection, ...] = ()

    def is_satisfied_by(self, version: Version) -> bool:
        return any(group.is_satisfied_by(version) for group in self.groups)


class NpmVersionRequirement:
    """An npm version requirement compiled once and evaluated many times.

    Args:
        raw_requirement: Requirement text such as ``"^1.2.3"`` or ``"1.0.0 - 2.0.0"``.

    Raises:
        RequirementParseError: If the text does not follow the range grammar.
        InvalidRequirementFormatError: If the text parses but is not a legal
            requirement, e.g. ``"1.x.3"``.
    """

    def __init__(self, raw_requirement: str):
        self.raw_requirement = raw_requirement.strip()
        with Timer() as timer:
            tree = parse_requirement(self.raw_requirement)
            self.union = Union(tuple(self._compile_intersection(node) for node in tree.intersections))
        if is_debug_enabled(logger):
            logger.debug(
                "Requirement compiled",
                extra=extra_context(
                    event="requirement_compiled",
                    component="requirement",
                    requirement=self.raw_requirement,
                    groups=len(self.union.groups),
                    clauses=sum(len(group.clauses) for group in self.union.groups),
                    duration_ms=timer.duration_ms(),
                ),
            )

    def _compile_intersection(self, node: IntersectionNode) -> Intersection:
        clauses: List[Clause] = []
        for operator_clause in node.operator_clauses:
            dash_clause = resolve_dash(operator_clause, self.raw_requirement)
            if dash_clause is not None:
                clause, error = compile_dash_clause(dash_clause)
            else:
                clause, error = compile_operator_clause(operator_clause)
            clauses.append(self._checked(clause, error))
        for dash_clause in node.dash_clauses:
            clause, error = compile_dash_clause(dash_clause)
            clauses.append(self._checked(clause, error))
        return Intersection(tuple(clauses))

    def _checked(self, clause, error) -> Clause:
        if error is not None:
            raise InvalidRequirementFormatError(self.raw_requirement, error)
        return clause

    def is_satisfied_by(self, version: TypingUnion[str, Version]) -> bool:
        """Return True if version meets this requirement.

        Args:
            version: A semantic_version.Version or a version string.

        Raises:
            ValueError: If version is a string that is not a semantic version.
        """
        return self.union.is_satisfied_by(to_version(version))

    def __contains__(self, version: TypingUnion[str, Version]) -> bool:
        return self.is_satisfied_by(version)

    def __str__(self) -> str:
        return self.raw_requirement

    def __repr__(self) -> str:
        return "NpmVersionRequirement(%r)" % self.raw_requirement


def satisfies(version: TypingUnion[str, Version], requirement: TypingUnion[str, NpmVersionRequirement]) -> bool:
    """Return True if version satisfies requirement; strings are compiled on the fly."""
    if not isinstance(requirement, NpmVersionRequirement):
        requirement = NpmVersionRequirement(requirement)
    return requirement.is_satisfied_by(version)
