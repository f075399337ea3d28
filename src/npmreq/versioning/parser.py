"""Grammar for npm version requirement strings.

    requirement  := intersection ( "||" intersection )*
    intersection := ( clause ( WS+ clause )* )?
    clause       := operator? WS* literal | literal WS* "-" WS* literal
    literal      := [vV]? part ( "." part ( "." part pre? build? )? )?
    part         := DIGITS | "x" | "X" | "*"
    pre          := WS* "-" WS* ident ( "." ident )*
    build        := "+" ident ( "." ident )*
    ident        := [0-9A-Za-z-]+

Whitespace around the dash that introduces a pre-release is not significant
here, so ``1.1.1 - 2.2.2`` and ``1.1.1-2.2.2`` yield the same literal. The
dash resolver decides which one the author meant by looking at the raw text.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..errors import RequirementParseError
from .models import (
    DashClauseNode,
    IntersectionNode,
    OperatorClauseNode,
    UnionNode,
    VersionLiteral,
)


class RequirementParser:
    """Parser turning a requirement string into a UnionNode tree."""

    _OR = "||"
    _OPERATOR_PATTERN = re.compile(r"(?P<op><=|>=|<|>|=|~|\^)\s*")
    _VERSION_PATTERN = re.compile(
        r"[vV]?(?P<major>\d+|[xX*])"
        r"(?:\.(?P<minor>\d+|[xX*])"
        r"(?:\.(?P<patch>\d+|[xX*]))?)?"
    )
    _PRE_RELEASE_PATTERN = re.compile(r"\s*-\s*(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)")
    _BUILD_PATTERN = re.compile(r"\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)")
    _DASH_PATTERN = re.compile(r"\s*-\s*")
    _WHITESPACE_PATTERN = re.compile(r"\s*")

    def parse(self, requirement: str) -> UnionNode:
        """Parse a full requirement string.

        Args:
            requirement: Requirement text, e.g. ``">=1.2.3 <2 || 3.x"``.

        Returns:
            UnionNode with one IntersectionNode per ``||`` group.

        Raises:
            RequirementParseError: If the text does not follow the grammar.
        """
        intersections: List[IntersectionNode] = []
        start = 0
        for segment in requirement.split(self._OR):
            end = start + len(segment)
            intersections.append(self._parse_intersection(requirement, start, end))
            start = end + len(self._OR)
        return UnionNode(tuple(intersections))

    def parse_version_literal(self, text: str) -> Optional[VersionLiteral]:
        """Parse text as exactly one version literal, or return None."""
        text = text.strip()
        try:
            literal, pos = self._parse_literal(text, 0, len(text))
        except RequirementParseError:
            return None
        return literal if pos == len(text) else None

    def _parse_intersection(self, text: str, pos: int, end: int) -> IntersectionNode:
        operator_clauses: List[OperatorClauseNode] = []
        dash_clauses: List[DashClauseNode] = []
        pos = self._skip_whitespace(text, pos, end)
        while pos < end:
            operator = None
            match = self._OPERATOR_PATTERN.match(text, pos, end)
            if match:
                operator = match.group("op")
                pos = match.end()
            literal, pos = self._parse_literal(text, pos, end)

            dash = self._DASH_PATTERN.match(text, pos, end) if operator is None else None
            if dash:
                upper, pos = self._parse_literal(text, dash.end(), end)
                dash_clauses.append(DashClauseNode(lower=literal, upper=upper))
            else:
                operator_clauses.append(OperatorClauseNode(operator=operator, version=literal))

            if pos < end and not text[pos].isspace():
                raise RequirementParseError(text, pos)
            pos = self._skip_whitespace(text, pos, end)
        return IntersectionNode(tuple(operator_clauses), tuple(dash_clauses))

    def _parse_literal(self, text: str, pos: int, end: int) -> Tuple[VersionLiteral, int]:
        match = self._VERSION_PATTERN.match(text, pos, end)
        if not match:
            raise RequirementParseError(text, pos)
        major, minor, patch = match.group("major", "minor", "patch")
        cursor = match.end()

        pre_release: Tuple[str, ...] = ()
        build: Tuple[str, ...] = ()
        if patch is not None:
            pre = self._PRE_RELEASE_PATTERN.match(text, cursor, end)
            if pre:
                pre_release = tuple(pre.group("pre").split("."))
                cursor = pre.end()
            meta = self._BUILD_PATTERN.match(text, cursor, end)
            if meta:
                build = tuple(meta.group("build").split("."))
                cursor = meta.end()

        literal = VersionLiteral(
            major=major,
            minor=minor,
            patch=patch,
            pre_release=pre_release,
            build=build,
            text=text[pos:cursor],
        )
        return literal, cursor

    def _skip_whitespace(self, text: str, pos: int, end: int) -> int:
        return self._WHITESPACE_PATTERN.match(text, pos, end).end()


_PARSER = RequirementParser()


def parse_requirement(requirement: str) -> UnionNode:
    """Parse requirement with the shared parser."""
    return _PARSER.parse(requirement)


def parse_version_literal(text: str) -> Optional[VersionLiteral]:
    return _PARSER.parse_version_literal(text)


def is_valid_partial_version(text: Optional[str]) -> bool:
    """True when text is a single (possibly partial) version literal, e.g. ``2``, ``2.2``, ``2.2.2-rc``."""
    return text is not None and parse_version_literal(text) is not None
