"""Argument parsing functionality for semcheck."""

import argparse
from .constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="semcheck",
        description=(
            "semcheck - Check versions against semantic version conditions"
        ),
        add_help=True,
    )

    parser.add_argument("-C", "--condition",
                        dest="CONDITION",
                        help="Version condition, i.e: '^1.2.3', '>=1.0 <2.0 || 3'",
                        action="store",
                        type=str)
    parser.add_argument("-V", "--version",
                        dest="VERSIONS",
                        help="Version to check against the condition (can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("-l", "--load_list",
                        dest="LIST_FROM_FILE",
                        help="Load versions to check from a file, one per line",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a checks file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=Constants.LOG_LEVELS,
                        default=Constants.DEFAULT_LOG_LEVEL)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-mismatch",
                        dest="ERROR_ON_MISMATCH",
                        help="Exit with a non-zero status code if any version does not satisfy its condition.",
                        action="store_true")
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    args = parser.parse_args(argv)
    if not args.CONDITION and not args.CONFIG:
        parser.error("one of the arguments -C/--condition -c/--config is required")
    if args.CONDITION and not (args.VERSIONS or args.LIST_FROM_FILE):
        parser.error("--condition requires at least one -V/--version or -l/--load_list")
    return args
