# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentHandler`, the capability set an application implements once to
receive the tokens classified by the Flagstream dispatcher.

Subclasses must implement `long`, `short`, `argument` and `subcommand`.
`version` and `help` have defaults and are never called by the dispatcher
itself; they exist for the application's own `--help` / `--version` handling.

Example:
    class Cli(ArgumentHandler):
        program = "cli"

        def __init__(self):
            self.output = None
            self.verbose = 0
            self.files = []

        def long(self, name, value):
            if name == "output":
                self.output = value()
            else:
                raise ArgumentError(f"Unknown flag --{name}")

        def short(self, char, is_last, value):
            if char == "v":
                self.verbose += 1
            else:
                raise ArgumentError(f"Unknown flag -{char}")

        def argument(self, arg, value):
            self.files.append(arg)
            return False

        def subcommand(self, command, command_args):
            raise ArgumentError(f"Unknown command {command}")

    cli = parse(Cli, ["--output", "out.txt", "-vv", "a.txt"])
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Iterator

from flagstream.parser.supplier import ValueSupplier
from flagstream.version import __version__


class ArgumentHandler(ABC):
    """
    Base class for the application object that accumulates parse results.

    An instance is created with no arguments before parsing starts, mutated by
    every callback, and returned by `parse()` when the tokens are exhausted or a
    subcommand has been dispatched.

    Attributes:
        program (str): Program name used by the default `version()`.
        program_version (str): Program version used by the default `version()`.
    """

    program: str = "flagstream"
    program_version: str = __version__

    def version(self) -> str:
        """Get the application version."""
        return f"{self.program} v{self.program_version}"

    def help(self) -> str:
        """Get the help message: the version line followed by the class docstring."""
        doc = type(self).__doc__
        if not doc:
            return self.version()
        return f"{self.version()}\n\n{inspect.cleandoc(doc)}"

    @abstractmethod
    def long(self, name: str, value: ValueSupplier) -> None:
        """Handle a long flag (`--name` or `--name=value`)."""

    @abstractmethod
    def short(self, char: str, is_last: bool, value: ValueSupplier) -> None:
        """
        Handle one character of a short flag cluster.

        Only the last flag of a cluster (`is_last=True`) can take a value.
        """

    @abstractmethod
    def argument(self, arg: str, value: ValueSupplier) -> bool:
        """
        Handle a positional argument.

        Return True to retry it as a subcommand, giving it the rest of the tokens.
        """

    @abstractmethod
    def subcommand(self, command: str, command_args: Iterator[str]) -> None:
        """Handle a subcommand with the remaining unconsumed tokens."""
