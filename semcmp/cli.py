#!/usr/bin/env python3
"""
semcmp CLI Entry Point

Handles:
- Comparing two versions (prints -1, 0 or 1)
- Validating one or more versions
- Mapping invalid input to a diagnostic and exit status
"""

import argparse
import sys
from typing import List, Optional

from semcmp import __version__, __package_name__
from semcmp.config import ConfigManager
from semcmp.core import InvalidFormat, compare_versions, is_valid
from semcmp.utils import Logger

EXIT_OK = 0
EXIT_INVALID = 1

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semcmp",
        description="Compare two Semantic Versioning 2.0.0 strings by precedence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  semcmp 1.0.0 2.0.0                 Prints -1
  semcmp 1.0.0+build.1 1.0.0+sha.5   Prints 0 (build metadata is ignored)
  semcmp 1.0.0 1.0.0-rc.1            Prints 1
  semcmp --validate 1.2.3 1.02.3     Prints valid / invalid per argument

Exit status:
  0  comparison printed, or every --validate argument is valid
  1  an argument is not a valid semantic version
  2  usage error
"""
    )

    parser.add_argument(
        "versions",
        nargs="*",
        metavar="VERSION",
        help="Two versions to compare, or any number with --validate"
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only validate the given versions"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: SEMCMP_LOG_LEVEL, or by ENVIRONMENT)"
    )
    return parser


def run_compare(first: str, second: str, logger: Logger) -> int:
    """Compare two versions and print the result."""
    try:
        result = compare_versions(first, second)
    except InvalidFormat as e:
        logger.debug(f"Comparison aborted: {e}")
        print(f"Invalid version: {e.value!r} ({e.reason})", file=sys.stderr)
        return EXIT_INVALID

    logger.info(f"compare({first!r}, {second!r}) = {result.name}")
    print(result)
    return EXIT_OK


def run_validate(versions: List[str], logger: Logger) -> int:
    """Print valid/invalid for each version."""
    status = EXIT_OK
    for raw in versions:
        if is_valid(raw):
            print(f"{raw}: valid")
        else:
            print(f"{raw}: invalid")
            status = EXIT_INVALID
    logger.info(f"Validated {len(versions)} version(s)")
    return status


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and dispatch; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return EXIT_OK

    config = ConfigManager.get_instance().load()
    logger = Logger(name=__package_name__, level=args.log_level or config.log_level)

    if args.validate:
        if not args.versions:
            parser.error("--validate needs at least one VERSION")
        return run_validate(args.versions, logger)

    if len(args.versions) != 2:
        parser.error("expected exactly two versions to compare")
    return run_compare(args.versions[0], args.versions[1], logger)


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
