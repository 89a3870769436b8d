"""CLI entrypoints for bruno-doc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from . import __version__
from .assembler import Assembler
from .config import ConfigError, init_config, load_config, save_config
from .constants import DEFAULT_CONFIG_FILE_NAME, DEFAULT_LOG_FILE_NAME
from .errors import BuildFailure, OverwriteDeclined, SourcePathNotFound
from .logging import VERBOSE, configure_logging, get_logger
from .models import BuildOutcome
from .prompts import ConsolePrompter
from .wizard import GuidedBuild

logger = get_logger("cli")


def _add_common_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress_default else value

    parser.add_argument(
        "-c",
        "--config-file",
        default=default(DEFAULT_CONFIG_FILE_NAME),
        help=f"Optional path to config file (defaults to {DEFAULT_CONFIG_FILE_NAME}).",
    )
    parser.add_argument(
        "-s", "--source", default=default(None), help="Path to folder containing .bru files."
    )
    parser.add_argument(
        "-d", "--destination", default=default(None), help="The path and name of the output file."
    )
    parser.add_argument(
        "--header", default=default(None), help="The path and name of the header file."
    )
    parser.add_argument("--tail", default=default(None), help="The path and name of the tail file.")
    # Before the subcommand a greedy list would swallow the command name.
    parser.add_argument(
        "--excludes",
        action="extend",
        nargs="+" if suppress_default else 1,
        metavar="NAME",
        default=default(None),
        help="Names of .bru files to leave out of the documentation (repeatable).",
    )
    parser.add_argument(
        "-f", "--force", action="store_true", default=default(False), help="Overwrite existing data."
    )
    parser.add_argument(
        "-t",
        "--test",
        action="store_true",
        default=default(False),
        help="Test the documentation build process without writing files.",
    )
    parser.add_argument(
        "--debug", action="store_true", default=default(False), help="Log debugging information."
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        default=default(False),
        help="Offer to save the effective options to the config file after building.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--silent", action="store_true", default=default(False), help="Produce no output."
    )
    verbosity.add_argument(
        "-r", "--verbose", action="store_true", default=default(False), help="Log extra information."
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bruno-doc",
        description="Build Markdown API documentation from a collection of Bruno .bru files.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Builds the API documentation.")
    _add_common_options(build_parser, suppress_default=True)

    guided_parser = subparsers.add_parser(
        "guided",
        help="Answer a few questions, then build the API documentation.",
    )
    _add_common_options(guided_parser, suppress_default=True)

    init_parser = subparsers.add_parser("init", help="Initialize the configuration file.")
    _add_common_options(init_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for bruno-doc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    options = vars(args)

    log_file = Path.cwd() / DEFAULT_LOG_FILE_NAME
    configure_logging(
        verbose=bool(args.verbose),
        silent=bool(args.silent),
        debug=bool(args.debug),
        log_file=log_file,
    )
    logger.log(VERBOSE, "bruno-doc version %s", __version__)
    logger.log(VERBOSE, "Working directory is %s", Path.cwd())
    logger.log(VERBOSE, "Log file will be saved to %s", log_file)
    logger.log(VERBOSE, "Command line arguments are %s", argv if argv is not None else sys.argv[1:])

    if args.command == "init":
        try:
            config_path = init_config(args.config_file, force=bool(args.force))
        except FileExistsError as exc:
            parser.exit(1, f"{exc}\n")
        except OSError as exc:
            logger.error("Unable to write config file", exc_info=True)
            parser.exit(1, f"bruno-doc init failed: {exc}\n")
        if not args.silent:
            print(f"Config file created at {_relativize(config_path)}")
        return

    try:
        config = load_config(args.config_file, overrides=options)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    # Settings from the config file may change verbosity.
    configure_logging(
        verbose=config.verbose,
        silent=config.silent,
        debug=config.debug,
        log_file=log_file,
        append=True,
    )

    prompter = ConsolePrompter()
    if args.command == "build":
        logger.info("%s...", "Testing build process" if config.test else "Building documentation")
        outcome = _run_guarded(parser, lambda: Assembler(prompter=prompter).assemble(config))
        if outcome is not None and not config.silent:
            _report(outcome)
        if args.save_config:
            try:
                save_config(config, args.config_file, prompter)
            except ConfigError as exc:
                parser.exit(1, f"{exc}\n")
    elif args.command == "guided":
        wizard = GuidedBuild(prompter=prompter)
        outcome = _run_guarded(parser, lambda: wizard.run(config, args.config_file))
        if outcome is not None and not config.silent:
            _report(outcome)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_guarded(
    parser: argparse.ArgumentParser, action: Callable[[], BuildOutcome | None]
) -> BuildOutcome | None:
    try:
        return action()
    except SourcePathNotFound as exc:
        logger.warning("%s", exc)
        parser.exit(1, f"{exc}\n")
    except OverwriteDeclined as exc:
        logger.info("%s", exc)
        parser.exit(1, f"{exc}\n")
    except (BuildFailure, ConfigError, OSError) as exc:
        logger.error("Build failed: %s", exc, exc_info=True)
        parser.exit(
            1,
            f"bruno-doc build failed: {exc}\n"
            f"Build complete with errors; see {DEFAULT_LOG_FILE_NAME} for details.\n",
        )


def _report(outcome: BuildOutcome) -> None:
    if not outcome.files:
        print("No documentation written")
    elif outcome.dry_run:
        print(f"Test complete: {len(outcome.contributed)} of {len(outcome.files)} files documented")
    else:
        print(f"Documentation written to {_relativize(outcome.destination)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
