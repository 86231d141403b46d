# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagstream.

Every failure aborts the parse immediately, so each exception describes exactly
one problem in a human-readable message. The structured attributes on each
class exist for callers that want to react to a specific kind of failure.

Exception Hierarchy:
- FlagstreamError
    ├── ArgumentError
    │    ├── EmptyInputError
    │    ├── UnusedInlineValueError
    │    ├── MissingValueError
    │    ├── ExpectedValueGotFlagError
    │    └── CannotTakeValueMidClusterError
    └── SupplierExpiredError

Handlers should raise `ArgumentError` (or a subclass) for their own failures,
such as an unknown flag or an invalid value.
"""
from __future__ import annotations


class FlagstreamError(Exception):
    """Base exception for Flagstream."""


class ArgumentError(FlagstreamError):
    """Exception raised when the token stream cannot be parsed."""


class EmptyInputError(ArgumentError):
    """Exception raised when no tokens were given at all."""

    def __init__(self, message: str = "No arguments given"):
        super().__init__(message)


class UnusedInlineValueError(ArgumentError):
    """Exception raised when a `--flag=value` or `-f=value` value was never taken."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Flag '{name}' was given argument '{value}' without using it")


class MissingValueError(ArgumentError):
    """Exception raised when a value was requested but no tokens were left."""

    def __init__(self, flag: str | None = None):
        self.flag = flag
        if flag:
            message = f"Expected value for {flag} but no arguments were left"
        else:
            message = "Expected value but no arguments were left"
        super().__init__(message)


class ExpectedValueGotFlagError(ArgumentError):
    """Exception raised when a value was requested but the next token is a flag."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Expected value, got flag {token}")


class CannotTakeValueMidClusterError(ArgumentError):
    """Exception raised when a mid-cluster short flag asks for a value."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Could not get argument for {flag} while in short chain")


class SupplierExpiredError(FlagstreamError):
    """Exception raised when a value supplier is used after its handler call returned."""
