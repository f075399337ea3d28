"""Lower/upper bound computation for version literals.

Every helper returns a ``(value, error)`` pair: on success error is None, on
failure value is None and error holds the offending requirement fragment.
Nothing here raises; the requirement constructor turns errors into exceptions.
"""

from typing import Optional, Tuple

from ..constants import Constants
from .models import VersionLiteral
from .version import MAX_VERSION, MIN_VERSION, Version

BoundResult = Tuple[Optional[Version], Optional[str]]


def is_wildcard(value: Optional[str]) -> bool:
    """A missing, blank, x, X or * field matches anything."""
    return value is None or not value.strip() or value.strip() in Constants.WILDCARDS


def is_any_version(literal: VersionLiteral) -> bool:
    """True for a literal like ``*`` or ``x.x`` whose major is a wildcard."""
    return is_wildcard(literal.major)


def validate(literal: VersionLiteral) -> Optional[str]:
    """Return the offending fragment if literal mixes wildcards illegally, else None."""
    minor_wildcard = is_wildcard(literal.minor)
    patch_wildcard = is_wildcard(literal.patch)
    tagged = bool(literal.pre_release) or bool(literal.build)

    if is_any_version(literal):
        if not (minor_wildcard and patch_wildcard) or tagged:
            return str(literal)
        return None
    if not literal.major.strip().isdigit():
        return str(literal)
    if minor_wildcard and not patch_wildcard:
        return "%s.%s.%s" % (literal.major, literal.minor, literal.patch)
    if (minor_wildcard or patch_wildcard) and tagged:
        return str(literal)
    return None


def numeric_fields(literal: VersionLiteral) -> Tuple[int, int, int]:
    """Return (major, minor, patch) with wildcards read as 0."""
    return tuple(
        0 if is_wildcard(part) else int(part)
        for part in (literal.major, literal.minor, literal.patch)
    )


def make_version(
    major: int,
    minor: int,
    patch: int,
    pre_release: Tuple[str, ...] = (),
    build: Tuple[str, ...] = (),
    fragment: str = "",
) -> BoundResult:
    """Build a Version, reporting identifiers semantic_version rejects as an error."""
    try:
        return Version(major=major, minor=minor, patch=patch, prerelease=pre_release, build=build), None
    except ValueError:
        return None, fragment or "%d.%d.%d" % (major, minor, patch)


def min_for(literal: VersionLiteral) -> BoundResult:
    """Lowest version a literal stands for.

    Wildcards become 0; pre-release and build survive only on a full literal.
    """
    error = validate(literal)
    if error:
        return None, error
    if is_any_version(literal):
        return MIN_VERSION, None

    major, minor, patch = numeric_fields(literal)
    if is_wildcard(literal.minor) or is_wildcard(literal.patch):
        return make_version(major, minor, patch, fragment=str(literal))
    return make_version(major, minor, patch, literal.pre_release, literal.build, str(literal))


def max_for(literal: VersionLiteral) -> BoundResult:
    """Upper version a literal stands for.

    ``1.x`` -> 2.0.0, ``1.2.x`` -> 1.3.0, a full literal -> itself. Whether the
    bound is inclusive is up to the caller.
    """
    error = validate(literal)
    if error:
        return None, error
    if is_any_version(literal):
        return MAX_VERSION, None

    major, minor, patch = numeric_fields(literal)
    if is_wildcard(literal.minor):
        return make_version(major + 1, 0, 0, fragment=str(literal))
    if is_wildcard(literal.patch):
        return make_version(major, minor + 1, 0, fragment=str(literal))
    return make_version(major, minor, patch, literal.pre_release, literal.build, str(literal))
