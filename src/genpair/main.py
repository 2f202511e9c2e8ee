"""Main entry point for genpair."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, Optional

from .domain.errors import ExitCode, FileCreateError, ParseError, TargetExistsError
from .domain.services.generation import FilePairGenerator
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing

USAGE_HEADER = "class and header generator usage:"


class OptionsParser(argparse.ArgumentParser):
    """ArgumentParser that raises ParseError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def build_parser() -> OptionsParser:
    """Build the command line parser."""
    parser = OptionsParser(
        prog="genpair",
        description="Generate a C++ header/source pair with an include guard "
        "and an empty namespace block",
        epilog="""
Examples:
  # Widget.hpp / Widget.cpp in namespace gui
  genpair -n gui -c Widget

  # Widget.h / Widget.cc
  genpair -n gui -c Widget -s cc

  # Widget.hxx / Widget.cxx written to src/
  genpair -n gui -c Widget -s cxx -o src
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action=UsageAction,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        type=str,
        help="namespace, used to build header guards",
    )
    parser.add_argument(
        "-c",
        "--class",
        dest="class_name",
        type=str,
        help="header and source file name, class name",
    )
    parser.add_argument(
        "-s",
        "--style",
        type=str,
        default="cpp",
        help="filename style: cc/cxx/cpp h/hxx/hpp (default: cpp)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Output directory for the generated files (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="DIR",
        help="Also write a timestamped debug log file into DIR",
    )
    return parser


def print_usage(parser: argparse.ArgumentParser) -> None:
    """Print the usage banner and help text to stdout."""
    print(f"{USAGE_HEADER}\n{parser.format_help()}")


class UsageAction(argparse.Action):
    """-h/--help: print the usage banner and help text, then exit 0."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = argparse.SUPPRESS,
        default: str = argparse.SUPPRESS,
        help: Optional[str] = None,
    ) -> None:
        super().__init__(
            option_strings=option_strings, dest=dest, default=default, nargs=0, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: object,
        option_string: Optional[str] = None,
    ) -> NoReturn:
        print_usage(parser)
        parser.exit()


@log_timing
def generate_pair(config: Config) -> tuple[Path, Path]:
    """Generate the header/source pair described by a validated configuration."""
    logger = get_logger(__name__)
    request = config.to_request()
    logger.debug(f"Namespace: {request.namespace_name}")
    logger.debug(f"Class: {request.class_name}")
    logger.debug(f"Output directory: {config.output_dir}")

    return FilePairGenerator(config.output_dir).generate(request)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Main entry point: parse options, generate the pair, exit with a status code."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except ParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(e.exit_code)

    if not args.namespace or not args.class_name:
        print_usage(parser)
        sys.exit(ExitCode.SUCCESS)

    config = Config.from_args(
        namespace=args.namespace,
        class_name=args.class_name,
        style=args.style,
        output_dir=args.output_dir,
        verbose=args.verbose,
        log_dir=args.log_dir,
    )
    try:
        config.validate()
        config.ensure_log_dir()
        LoggerSetup.initialize(verbose=config.verbose, log_dir=config.log_dir)
    except (ValueError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(ExitCode.FAILURE_CREATE_FILE)

    logger = get_logger(__name__)

    if config.style.value != args.style:
        logger.debug(f"Unrecognized style '{args.style}', using {config.style.value}")

    try:
        generate_pair(config)
    except TargetExistsError as e:
        logger.error(str(e))
        sys.exit(e.exit_code)
    except FileCreateError as e:
        logger.error(f"Failed to create files: {e}")
        sys.exit(e.exit_code)

    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
