# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements the Flagstream dispatcher: the state machine that walks a token
stream and routes every token to an `ArgumentHandler`.

For each token the dispatcher:
- classifies it as a long flag, a short flag cluster or a positional argument,
- builds a value supplier bound to the inline value or to the rest of the stream,
- calls the matching handler method and expires the supplier when it returns.

Long flags (`--name`, `--name=value`):
    `--name=value` calls `long("name", <"value">)`; if the handler never takes the
    value the parse fails with `UnusedInlineValueError`. `--name` calls
    `long("name", <next token>)`; the handler decides whether to pull the value.

Short clusters (`-abc`, `-abc=value`):
    Characters are dispatched one at a time. A character followed by `=` is the
    last flag and receives everything after the first `=`. Other characters that
    are followed by more characters cannot take a value. The final character of a
    cluster without `=` may pull the next token. `-ab=x` dispatches `a` as a
    mid-cluster flag and `b` as the last flag with the value `x`.

Positional arguments:
    `argument(token, <next token>)` is called. If it returns True, the token is
    retried as a subcommand: `subcommand(token, remaining)` receives every
    unconsumed token and the parse ends.

Any exception raised by a handler aborts the parse.

Public Interface:
- `parse(handler_cls, tokens)`: Parse an arbitrary token iterable.
- `parse_args(handler_cls, argv=None)`: Parse the process arguments.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Sequence, TypeVar

from flagstream.exceptions import EmptyInputError, UnusedInlineValueError
from flagstream.logger import logger
from flagstream.parser.handler import ArgumentHandler
from flagstream.parser.supplier import (
    ClusterValue,
    InlineValue,
    StreamValue,
    ValueSupplier,
)
from flagstream.parser.tokens import (
    Dispatch,
    TokenKind,
    TokenStream,
    classify_token,
)

H = TypeVar("H", bound=ArgumentHandler)
S = TypeVar("S", bound=ValueSupplier)


@contextmanager
def _supplied(supplier: S) -> Iterator[S]:
    """Expire a value supplier once the handler call using it has returned."""
    try:
        yield supplier
    finally:
        supplier.expire()


def _check_inline_taken(supplier: InlineValue, name: str) -> None:
    if not supplier.taken:
        raise UnusedInlineValueError(name, supplier.value)


def _dispatch_long(
    handler: ArgumentHandler, token: Dispatch, stream: TokenStream
) -> None:
    name, inline = token.name, token.inline_value
    if inline is not None:
        logger.debug("Long flag '%s' with inline value '%s'", name, inline)
        with _supplied(InlineValue(name, inline)) as supplier:
            handler.long(name, supplier)
        _check_inline_taken(supplier, name)
    else:
        logger.debug("Long flag '%s'", name)
        with _supplied(StreamValue(name, stream)) as supplier:
            handler.long(name, supplier)


def _dispatch_short(
    handler: ArgumentHandler, cluster: str, stream: TokenStream
) -> None:
    for index, char in enumerate(cluster):
        following = cluster[index + 1 : index + 2]
        if following == "=":
            inline = cluster.partition("=")[2]
            logger.debug("Short flag '%s' with inline value '%s'", char, inline)
            with _supplied(InlineValue(char, inline)) as supplier:
                handler.short(char, True, supplier)
            _check_inline_taken(supplier, char)
            break
        elif following:
            logger.debug("Short flag '%s' in cluster '-%s'", char, cluster)
            with _supplied(ClusterValue(char)) as supplier:
                handler.short(char, False, supplier)
        else:
            logger.debug("Short flag '%s' ends cluster '-%s'", char, cluster)
            with _supplied(StreamValue(char, stream, name_in_errors=True)) as supplier:
                handler.short(char, True, supplier)


def _dispatch_argument(
    handler: ArgumentHandler, arg: str, stream: TokenStream
) -> bool:
    logger.debug("Positional argument '%s'", arg)
    with _supplied(StreamValue(arg, stream)) as supplier:
        retry_as_subcommand = handler.argument(arg, supplier)
    if retry_as_subcommand:
        logger.debug("Dispatching subcommand '%s' at token %d", arg, stream.position)
        handler.subcommand(arg, stream.remaining())
        return True
    return False


def parse(handler_cls: type[H], tokens: Iterable[str]) -> H:
    """
    Parse a token sequence into a freshly constructed handler.

    Args:
        handler_cls (type[ArgumentHandler]): Handler class, built with no arguments.
        tokens (Iterable[str]): The tokens to parse, program name excluded. May be
            lazy or infinite; only one token of lookahead is ever held.

    Returns:
        ArgumentHandler: The handler after every token has been dispatched, or after
        a subcommand has been dispatched.

    Raises:
        EmptyInputError: If `tokens` is empty.
        ArgumentError: If a value could not be supplied or an inline value was
            never used, or whatever the handler raised.
    """
    stream = TokenStream(tokens)
    if stream.is_empty():
        raise EmptyInputError()

    handler = handler_cls()

    while (token := stream.next()) is not None:
        dispatch = classify_token(token)
        if dispatch.kind is TokenKind.LONG:
            _dispatch_long(handler, dispatch, stream)
        elif dispatch.kind is TokenKind.SHORT:
            _dispatch_short(handler, token[1:], stream)
        elif _dispatch_argument(handler, token, stream):
            break

    return handler


def parse_args(handler_cls: type[H], argv: Sequence[str] | None = None) -> H:
    """Parse the process arguments, skipping the program name."""
    if argv is None:
        argv = sys.argv[1:]
    return parse(handler_cls, argv)
