# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token stream and token classification for the Flagstream dispatcher.

`TokenStream` wraps any iterable of strings in a single-pass cursor that holds
at most one token of lookahead. `classify_token()` decides, from the leading
characters alone, whether a token is a long flag, a short flag cluster or a
positional argument.

Classification rules:
- `--anything` is a long flag, including a bare `--`.
- `-x...` is a short flag cluster (one dash and at least one character).
- Everything else, including a bare `-`, is positional.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

_MISSING = object()


class TokenKind(Enum):
    """The three shapes a raw token can take."""

    LONG = "long"
    SHORT = "short"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Dispatch:
    """
    The classification of a single raw token.

    Attributes:
        kind (TokenKind): Long flag, short cluster or positional.
        token (str): The raw token.
        name (str): Flag name for LONG, cluster characters for SHORT (without the
            inline value), the token itself for POSITIONAL.
        inline_value (str | None): Text after the first `=`, for flags only.
    """

    kind: TokenKind
    token: str
    name: str
    inline_value: str | None = None


def is_flag(token: str) -> bool:
    """Return True if a token would be rejected as a flag value."""
    return token.startswith("-")


def classify_token(token: str) -> Dispatch:
    """Classify a raw token as a long flag, short cluster or positional."""
    if token.startswith("--"):
        name, sep, value = token[2:].partition("=")
        return Dispatch(TokenKind.LONG, token, name, value if sep else None)
    if token.startswith("-") and len(token) > 1:
        chars, sep, value = token[1:].partition("=")
        return Dispatch(TokenKind.SHORT, token, chars, value if sep else None)
    return Dispatch(TokenKind.POSITIONAL, token, token)


class TokenStream:
    """
    Single-pass cursor over a lazily produced sequence of tokens.

    Only one token of lookahead is ever buffered, so the stream is safe to use
    with infinite or live sources. Iterating the stream yields the buffered
    token first and then the untouched rest of the source.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self._source: Iterator[str] = iter(tokens)
        self._lookahead: object = _MISSING
        self.position: int = 0

    def peek(self) -> str | None:
        """Return the next token without consuming it, or None if exhausted."""
        if self._lookahead is _MISSING:
            self._lookahead = next(self._source, _MISSING)
        if self._lookahead is _MISSING:
            return None
        return self._lookahead  # type: ignore[return-value]

    def next(self) -> str | None:
        """Consume and return the next token, or None if exhausted."""
        token = self.peek()
        if token is not None:
            self._lookahead = _MISSING
            self.position += 1
        return token

    def is_empty(self) -> bool:
        return self.peek() is None

    def remaining(self) -> Iterator[str]:
        """Hand off every unconsumed token as a fresh single-pass iterator."""
        while (token := self.next()) is not None:
            yield token

    def __iter__(self) -> Iterator[str]:
        return self.remaining()

    def __repr__(self) -> str:
        return f"TokenStream(position={self.position})"
