"""Dash disambiguation between a pre-release and a dash range.

``1.1.1-2.2.2`` is a version whose pre-release is ``2.2.2``; ``1.1.1 - 2.2.2``
is the range 1.1.1 to 2.2.2. The grammar reads both the same way, so the raw
requirement text is searched for whitespace around that dash. This mirrors
npm's own behaviour, quirks included (a build segment on the second half, as
in ``1.0.0 - 2.0.0+b``, keeps the literal a single version).
"""

import logging
import re
from typing import Optional

from ..common.logging_utils import extra_context, is_debug_enabled
from .models import DashClauseNode, OperatorClauseNode, VersionLiteral
from .parser import parse_version_literal

logger = logging.getLogger(__name__)


def has_spaced_dash(literal: VersionLiteral, raw_requirement: str) -> bool:
    """True if raw_requirement writes literal's triple, a padded dash, then its pre-release."""
    pattern = r"%s\.%s\.%s(?:\s+-\s*|-\s+)%s" % (
        re.escape(literal.major),
        re.escape(literal.minor or ""),
        re.escape(literal.patch or ""),
        re.escape(literal.pre_release_text or ""),
    )
    return re.search(pattern, raw_requirement) is not None


def resolve_dash(node: OperatorClauseNode, raw_requirement: str) -> Optional[DashClauseNode]:
    """Return a DashClauseNode if node is really ``A - B`` in disguise, else None.

    Must run before the clause's operator is looked at: an operator in front
    of such a range is dropped, as npm does.
    """
    literal = node.version
    pre_release = literal.pre_release_text
    if literal.build or pre_release is None:
        return None
    upper = parse_version_literal(pre_release)
    if upper is None:
        return None
    if not has_spaced_dash(literal, raw_requirement):
        return None

    lower = literal.without_pre_release()
    if is_debug_enabled(logger):
        logger.debug(
            "Pre-release read as dash range",
            extra=extra_context(
                event="dash_resolved",
                component="dash",
                lower=str(lower),
                upper=str(upper),
                requirement=raw_requirement,
            ),
        )
    return DashClauseNode(lower=lower, upper=upper)
