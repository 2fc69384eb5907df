"""Command line interface for termsuggest."""

import argparse
import asyncio
import json
import sys

from .config_loader import load_configuration
from .logging_setup import get_logger, init_logger
from .models import ConfigError, ExitCode
from .provider import SuggestProvider

__all__ = ["main", "run_client"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsuggest",
        description="Show the completions available at the cursor of a command line.",
    )
    parser.add_argument("command_line", help="the command line being typed")
    parser.add_argument("--cursor", "-c", type=int, default=None, help="cursor offset (defaults to the end of the line)")
    parser.add_argument("--config", default="", help="configuration file or directory")
    parser.add_argument("--path", default=None, help="search path used to find commands (defaults to $PATH)")
    parser.add_argument("--json", action="store_true", help="print the completions as JSON")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also log to this file")
    return parser


async def run_client(args: argparse.Namespace) -> ExitCode:
    """Run one completion request and print the result."""
    log = get_logger("client")
    try:
        config = load_configuration(log, args.config)
    except ConfigError as e:
        log.critical("Unable to load the configuration: %s", e)
        return ExitCode.CONFIG_ERROR

    cursor = len(args.command_line) if args.cursor is None else args.cursor
    provider = SuggestProvider(config, path_env=args.path)
    completions = await provider.provide_completions(args.command_line, cursor)

    if args.json:
        print(json.dumps([c.to_dict() for c in completions or ()], indent=2))
    else:
        for completion in completions or ():
            print(f"{completion.label}\t{completion.description}")
    return ExitCode.SUCCESS if completions else ExitCode.NO_COMPLETIONS


def main() -> None:
    """Entry point of the `termsuggest` command."""
    parser = _build_parser()
    args = parser.parse_args()
    if args.cursor is not None and args.cursor < 0:
        parser.error("--cursor must be positive")
    init_logger(args.log_file, force_debug=args.debug)
    sys.exit(asyncio.run(run_client(args)))
