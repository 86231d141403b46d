"""
Flagstream

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .dispatcher import parse, parse_args
from .handler import ArgumentHandler
from .supplier import ClusterValue, InlineValue, StreamValue, ValueSupplier
from .tokens import Dispatch, TokenKind, TokenStream, classify_token

__all__ = [
    "ArgumentHandler",
    "ClusterValue",
    "Dispatch",
    "InlineValue",
    "StreamValue",
    "TokenKind",
    "TokenStream",
    "ValueSupplier",
    "classify_token",
    "parse",
    "parse_args",
]
