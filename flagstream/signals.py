# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals for applications built on Flagstream.

A handler raises one of these from inside `long()` or `short()` to stop the
parse without it being reported as an error, e.g. when `--help` is seen.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
so they pass through `except Exception` blocks untouched.

Signals:
- HelpSignal: Print help and stop.
- VersionSignal: Print the version and stop.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Flagstream.

    These are not errors. They stop the parse early on behalf of the user.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised to display version information."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
