"""Main entry point for the OraRegex command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

import regex
import yaml

from . import __version__, paths
from .config import DEFAULT_SETTINGS, EmulationSettings, load_settings
from .exceptions import InvalidArgumentError
from .functions import regexp_count, regexp_instr, regexp_like, regexp_substr
from .logging_utils import setup_logging
from .verification import run_verification

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VERIFY_FAILED = 1
EXIT_USAGE = 2


def _add_common_arguments(parser: argparse.ArgumentParser, *, position: bool = True) -> None:
    """Add the subject/pattern pair and the options shared by the operation commands."""
    parser.add_argument("subject", help="The text to search.")
    parser.add_argument("pattern", help="The regular expression.")
    if position:
        parser.add_argument("--position", type=int, default=1, help="1-based offset where the search starts (default: 1).")
    parser.add_argument("--flags", default=None, help="Oracle match parameter string, e.g. 'in'.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the OraRegex CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="Oracle REGEXP_* function emulation")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"OraRegex {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug level logging.")
    parser.add_argument("--config", default=None, help="Path to a YAML settings file (default: search upwards for oraregex.yaml).")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    like_parser = subparsers.add_parser("like", help="REGEXP_LIKE: print true or false.")
    _add_common_arguments(like_parser, position=False)

    count_parser = subparsers.add_parser("count", help="REGEXP_COUNT: print the number of matches.")
    _add_common_arguments(count_parser)

    instr_parser = subparsers.add_parser("instr", help="REGEXP_INSTR: print the position of a match.")
    _add_common_arguments(instr_parser)
    instr_parser.add_argument("--occurrence", type=int, default=1, help="Which match to report (default: 1).")
    instr_parser.add_argument("--return-opt", type=int, default=0, help="0 for the match start, 1 for just past its end.")
    instr_parser.add_argument("--group", type=int, default=0, help="Subexpression to report; 0 is the whole match.")

    substr_parser = subparsers.add_parser("substr", help="REGEXP_SUBSTR: print the matched text.")
    _add_common_arguments(substr_parser)
    substr_parser.add_argument("--occurrence", type=int, default=1, help="Which match to return (default: 1).")
    substr_parser.add_argument("--group", type=int, default=0, help="Subexpression to return; 0 is the whole match.")

    subparsers.add_parser("verify", help="Run the built-in Oracle compatibility checks.")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_USAGE)
    return args


def _load_settings(config_path: str | None) -> EmulationSettings:
    """
    Load settings from an explicit path or from a discovered settings file.

    Returns:
        The loaded settings, or the defaults when no file is found.

    """
    path = Path(config_path) if config_path else paths.find_config_file()
    if path is None:
        logger.debug("No settings file found; using defaults.")
        return DEFAULT_SETTINGS
    logger.info("Loading settings from: %s", path)
    return load_settings(path)


def _format_result(value: object) -> str:
    """Render a function result the way a SQL client would."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _run_command(args: argparse.Namespace, settings: EmulationSettings) -> int:
    """Execute the selected command and return the process exit code."""
    if args.command == "verify":
        results = run_verification(settings=settings)
        failed = [r for r in results if not r.passed]
        for result in results:
            status = "PASS" if result.passed else "FAIL"
            detail = result.error or _format_result(result.actual)
            print(f"{status:<5} {result.case.name:<40} {detail}")  # noqa: T201
        print(f"{len(results) - len(failed)}/{len(results)} checks passed")  # noqa: T201
        return EXIT_VERIFY_FAILED if failed else EXIT_OK

    if args.command == "like":
        value: object = regexp_like(args.subject, args.pattern, args.flags, settings=settings)
    elif args.command == "count":
        value = regexp_count(args.subject, args.pattern, args.position, args.flags, settings=settings)
    elif args.command == "instr":
        value = regexp_instr(
            args.subject,
            args.pattern,
            args.position,
            args.occurrence,
            args.return_opt,
            args.flags,
            args.group,
            settings=settings,
        )
    else:
        value = regexp_substr(args.subject, args.pattern, args.position, args.occurrence, args.flags, args.group, settings=settings)

    print(_format_result(value))  # noqa: T201
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """
    Run the main entry point for the OraRegex command-line interface.

    Orchestrates the entire process:
    1. Parses command-line arguments.
    2. Loads the settings.
    3. Runs the requested command and exits with its status.
    """
    args = _parse_args(argv)
    setup_logging(version=__version__, debug=args.debug)

    try:
        settings = _load_settings(args.config)
    except (FileNotFoundError, yaml.YAMLError, ValueError):
        logger.exception("Failed to load settings.")
        sys.exit(EXIT_USAGE)

    try:
        exit_code = _run_command(args, settings)
    except InvalidArgumentError as e:
        logger.error("Invalid argument: %s", e)  # noqa: TRY400
        sys.exit(EXIT_USAGE)
    except regex.error as e:
        logger.error("Invalid regular expression: %s", e)  # noqa: TRY400
        sys.exit(EXIT_USAGE)
    except TimeoutError:
        logger.exception("Pattern evaluation exceeded the configured timeout.")
        sys.exit(EXIT_USAGE)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
