"""npmreq - npm version requirement matching.

Compiles npm range syntax (``^1.2.3``, ``~1.2``, ``1.0.0 - 2.0.0``,
``1.x || >=8.5.0``) into a predicate over semantic versions.

Example:
    >>> from npmreq import NpmVersionRequirement
    >>> NpmVersionRequirement("^0.2.3").is_satisfied_by("0.3.0")
    False
"""

__version__ = "0.1.0"

from .errors import InvalidRequirementError, InvalidRequirementFormatError, RequirementParseError
from .versioning import (
    MAX_VERSION,
    MIN_VERSION,
    NpmVersionRequirement,
    Version,
    VersionRange,
    satisfies,
)

__all__ = [
    "InvalidRequirementError",
    "InvalidRequirementFormatError",
    "RequirementParseError",
    "MAX_VERSION",
    "MIN_VERSION",
    "NpmVersionRequirement",
    "Version",
    "VersionRange",
    "satisfies",
]
