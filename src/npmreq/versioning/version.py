"""Helpers around semantic_version.Version used by the range engine.

semantic_version orders versions by precedence (build metadata ignored) but its
equality operator also compares build metadata, so equivalence is spelled out
here explicitly.
"""

from typing import Union

import semantic_version

from ..constants import Constants

Version = semantic_version.Version

MIN_VERSION = Version(major=0, minor=0, patch=0)
MAX_VERSION = Version(
    major=Constants.MAX_VERSION_COMPONENT,
    minor=Constants.MAX_VERSION_COMPONENT,
    patch=Constants.MAX_VERSION_COMPONENT,
)


def to_version(value: Union[str, Version]) -> Version:
    """Return value as a Version, parsing strings (a leading v/V is allowed).

    Raises:
        ValueError: If value is a string that is not a valid semantic version.
    """
    if isinstance(value, Version):
        return value
    text = str(value).strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    return Version(text)


def base_triple(version: Version) -> tuple:
    """Return (major, minor, patch)."""
    return (version.major, version.minor, version.patch)


def same_base(left: Version, right: Version) -> bool:
    return base_triple(left) == base_triple(right)


def equivalent_to(left: Version, right: Version) -> bool:
    """True when both versions share the triple and pre-release identifiers."""
    return same_base(left, right) and tuple(left.prerelease) == tuple(right.prerelease)


def newer_than(left: Version, right: Version) -> bool:
    return right < left


def older_than(left: Version, right: Version) -> bool:
    return left < right


def is_tagged(version: Version) -> bool:
    """True when the version carries pre-release or build identifiers."""
    return bool(version.prerelease) or bool(version.build)
