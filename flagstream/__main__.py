"""
Flagstream

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Iterable, Iterator, Sequence

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from flagstream.console import console
from flagstream.exceptions import ArgumentError, FlagstreamError
from flagstream.logger import logger
from flagstream.parser import (
    ArgumentHandler,
    ValueSupplier,
    classify_token,
    parse_args,
)
from flagstream.signals import HelpSignal, VersionSignal
from flagstream.utils import LOG_MODES, get_program_invocation, setup_logging

COMMANDS = ("trace",)


class FlagstreamCLI(ArgumentHandler):
    """
    usage: flagstream [OPTIONS] trace [TOKENS...]

    Commands:
      trace                 Show how each of TOKENS is classified.

    Options:
      -h, --help            Show this help message and exit.
      -V, --version         Show the version and exit.
      -v, --verbose         Enable debug logging.
      --log-mode MODE       Console log format: cli or json.
      --log-file PATH       Also write logs to PATH.
    """

    def __init__(self) -> None:
        self.verbose: int = 0
        self.log_mode: str | None = None
        self.log_file: str | None = None
        self.command: str | None = None
        self.command_args: list[str] = []

    def long(self, name: str, value: ValueSupplier) -> None:
        if name == "help":
            raise HelpSignal()
        elif name == "version":
            raise VersionSignal()
        elif name == "verbose":
            self.verbose += 1
        elif name == "log-mode":
            mode = value()
            if mode not in LOG_MODES:
                raise ArgumentError(
                    f"Invalid value for '--log-mode': must be one of "
                    f"{{{', '.join(LOG_MODES)}}}"
                )
            self.log_mode = mode
        elif name == "log-file":
            self.log_file = value()
        else:
            raise ArgumentError(f"Unrecognized option: --{name}")

    def short(self, char: str, is_last: bool, value: ValueSupplier) -> None:
        if char == "h":
            raise HelpSignal()
        elif char == "V":
            raise VersionSignal()
        elif char == "v":
            self.verbose += 1
        else:
            raise ArgumentError(f"Unrecognized option: -{char}")

    def argument(self, arg: str, value: ValueSupplier) -> bool:
        if arg not in COMMANDS:
            raise ArgumentError(
                f"Unknown command '{arg}': must be one of {{{', '.join(COMMANDS)}}}"
            )
        return True

    def subcommand(self, command: str, command_args: Iterator[str]) -> None:
        self.command = command
        self.command_args = list(command_args)


def render_trace(tokens: Iterable[str]) -> Table:
    """Build a table showing the classification of every token."""
    table = Table(title="Token classification", expand=False)
    table.add_column("#", justify="right")
    table.add_column("Token")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Inline value")
    for index, token in enumerate(tokens):
        dispatch = classify_token(token)
        inline = "" if dispatch.inline_value is None else dispatch.inline_value
        table.add_row(
            str(index),
            Text(token),
            str(dispatch.kind),
            Text(dispatch.name),
            Text(inline),
        )
    return table


def _print_error(message: str) -> None:
    console.print(f"[bold red]error:[/] {escape(message)}")
    console.print(
        f"Try '{escape(get_program_invocation())} --help' for more information."
    )


def main(argv: Sequence[str] | None = None) -> int:
    try:
        cli = parse_args(FlagstreamCLI, argv)
    except HelpSignal:
        console.print(FlagstreamCLI().help(), markup=False, highlight=False)
        return 0
    except VersionSignal:
        console.print(FlagstreamCLI().version(), markup=False, highlight=False)
        return 0
    except FlagstreamError as error:
        _print_error(str(error))
        return 2

    if cli.command is None:
        _print_error("No command given")
        return 2

    setup_logging(
        mode=cli.log_mode,
        log_filename=cli.log_file,
        console_log_level=logging.DEBUG if cli.verbose else logging.WARNING,
    )
    logger.debug("Running '%s' with %d tokens", cli.command, len(cli.command_args))

    if cli.command == "trace":
        console.print(render_trace(cli.command_args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
