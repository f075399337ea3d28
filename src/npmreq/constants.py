"""Constants used in the project."""

import sys
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the command line checker.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_VERSION = 1
    INVALID_REQUIREMENT = 2
    EXIT_WARNINGS = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "NPMREQ_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    # Tokens accepted in place of a numeric minor/patch (or a lone major).
    WILDCARDS = ("x", "X", "*")

    # Upper limit for every component of the synthetic MAX_VERSION.
    MAX_VERSION_COMPONENT = sys.maxsize

    # Operator token text -> Operator member name
    OPERATORS = {
        "=": "EQ",
        ">": "GT",
        "<": "LT",
        "<=": "LTEQ",
        ">=": "GTEQ",
        "~": "TILDE",
        "^": "CARET",
    }
