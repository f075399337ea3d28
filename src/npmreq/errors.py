"""Exceptions raised while compiling npm version requirements."""

from __future__ import annotations

from typing import Optional


class InvalidRequirementError(ValueError):
    """Raised when a requirement string cannot be compiled.

    Attributes:
        requirement: The raw requirement string as given by the caller.
        fragment: The offending part of the requirement, when known.
    """

    def __init__(self, requirement: str, fragment: Optional[str] = None, message: str = ""):
        self.requirement = requirement
        self.fragment = fragment
        self.message = message or f"Invalid requirement: {requirement!r}"
        super().__init__(self.message)


class RequirementParseError(InvalidRequirementError):
    """Raised when the requirement text does not follow the range grammar."""

    def __init__(self, requirement: str, position: int, message: str = ""):
        self.position = position
        fragment = requirement[position:]
        super().__init__(
            requirement,
            fragment,
            message or f"Cannot parse requirement {requirement!r} at position {position}: {fragment!r}",
        )


class InvalidRequirementFormatError(InvalidRequirementError):
    """Raised when a parseable requirement combines fields illegally (e.g. ``1.x.3``)."""

    def __init__(self, requirement: str, fragment: str):
        super().__init__(
            requirement,
            fragment,
            f"Invalid requirement format {fragment!r} in {requirement!r}",
        )
