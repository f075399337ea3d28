"""npmreq - command line entry point.

    Returns:
        int: Exit code (see constants.ExitCodes)
"""
import logging
import sys

from .args import parse_args
from .common.logging_utils import configure_logging
from .constants import ExitCodes
from .errors import InvalidRequirementError
from .versioning import NpmVersionRequirement, to_version


def main(argv=None) -> int:
    """Compile the requirement and report which versions satisfy it."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)

    try:
        requirement = NpmVersionRequirement(args.requirement)
    except InvalidRequirementError as e:
        logging.error("%s", e)
        return ExitCodes.INVALID_REQUIREMENT.value

    try:
        versions = [to_version(v) for v in args.versions]
    except ValueError as e:
        logging.error("Invalid version: %s", e)
        return ExitCodes.INVALID_VERSION.value

    all_satisfied = True
    for raw, version in zip(args.versions, versions):
        ok = requirement.is_satisfied_by(version)
        all_satisfied = all_satisfied and ok
        if not args.QUIET:
            print("%s\t%s" % (raw, "satisfied" if ok else "not satisfied"))

    if all_satisfied:
        return ExitCodes.SUCCESS.value
    return ExitCodes.EXIT_WARNINGS.value


if __name__ == "__main__":
    sys.exit(main())
