"""Argument parsing functionality for the npmreq checker."""

import argparse

from .constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="npmreq",
        description="Check versions against an npm version requirement",
        add_help=True,
    )

    parser.add_argument("requirement",
                        help="npm requirement, e.g. '^1.2.3' or '1.0.0 - 2.0.0'",
                        type=str)
    parser.add_argument("versions",
                        help="One or more versions to test",
                        nargs="+",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Print nothing; report through the exit code only",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default=None)

    return parser.parse_args(argv)
