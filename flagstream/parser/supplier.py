# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value suppliers handed to `ArgumentHandler` callbacks.

A value supplier is the capability a handler uses to pull the value of the flag
it is handling. Handlers call it like a function:

    def long(self, name, value):
        if name == "output":
            self.output = value()

The dispatcher creates a new supplier for every handler call and expires it as
soon as the call returns. A handler must not store a supplier and call it later.

Suppliers:
- InlineValue: Returns the text after `=` in `--flag=value` or `-f=value`.
- StreamValue: Pulls the next token, refusing tokens that look like flags.
- ClusterValue: Always fails; used for non-final flags of a short cluster.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from flagstream.exceptions import (
    CannotTakeValueMidClusterError,
    ExpectedValueGotFlagError,
    MissingValueError,
    SupplierExpiredError,
)
from flagstream.logger import logger
from flagstream.parser.tokens import TokenStream, is_flag


class ValueSupplier(ABC):
    """Base class for per-call value suppliers."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        self.taken: bool = False
        self._expired: bool = False

    def __call__(self) -> str:
        if self._expired:
            raise SupplierExpiredError(
                f"Value supplier for '{self.flag}' used after its handler returned"
            )
        value = self._supply()
        self.taken = True
        return value

    @abstractmethod
    def _supply(self) -> str:
        """Produce the value or raise an `ArgumentError`."""

    def expire(self) -> None:
        self._expired = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(flag={self.flag!r}, taken={self.taken})"


class InlineValue(ValueSupplier):
    """Supplies the inline value of `--flag=value` or `-f=value`."""

    def __init__(self, flag: str, value: str) -> None:
        super().__init__(flag)
        self.value = value

    def _supply(self) -> str:
        logger.debug("[%s] Taking inline value '%s'", self.flag, self.value)
        return self.value


class StreamValue(ValueSupplier):
    """Supplies the next token of the stream as the value."""

    def __init__(self, flag: str, stream: TokenStream, name_in_errors: bool = False):
        super().__init__(flag)
        self.stream = stream
        self.name_in_errors = name_in_errors

    def _supply(self) -> str:
        token = self.stream.peek()
        if token is None:
            raise MissingValueError(self.flag if self.name_in_errors else None)
        if is_flag(token):
            raise ExpectedValueGotFlagError(token)
        logger.debug("[%s] Taking value '%s' from the stream", self.flag, token)
        return self.stream.next()  # type: ignore[return-value]


class ClusterValue(ValueSupplier):
    """Refuses to supply a value to a flag in the middle of a short cluster."""

    def _supply(self) -> str:
        raise CannotTakeValueMidClusterError(self.flag)
