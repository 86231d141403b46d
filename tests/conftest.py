import pytest

from flagstream.parser import ArgumentHandler


class RecordingHandler(ArgumentHandler):
    """Records every callback and pulls values for the configured flags."""

    value_flags: frozenset = frozenset()
    subcommands: frozenset = frozenset()

    def __init__(self):
        self.calls = []
        self.values = {}
        self.command_args = None

    def long(self, name, value):
        self.calls.append(("long", name))
        if name in self.value_flags:
            self.values[name] = value()

    def short(self, char, is_last, value):
        self.calls.append(("short", char, is_last))
        if char in self.value_flags:
            self.values[char] = value()

    def argument(self, arg, value):
        self.calls.append(("argument", arg))
        return arg in self.subcommands

    def subcommand(self, command, command_args):
        self.calls.append(("subcommand", command))
        self.command_args = list(command_args)

    def __eq__(self, other):
        if not isinstance(other, RecordingHandler):
            return NotImplemented
        return (self.calls, self.values, self.command_args) == (
            other.calls,
            other.values,
            other.command_args,
        )


@pytest.fixture
def make_handler():
    def factory(value_flags=(), subcommands=()):
        return type(
            "ConfiguredHandler",
            (RecordingHandler,),
            {
                "value_flags": frozenset(value_flags),
                "subcommands": frozenset(subcommands),
            },
        )

    return factory
