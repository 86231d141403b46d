"""
Flagstream

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import ArgumentError, FlagstreamError
from .logger import logger
from .parser import ArgumentHandler, ValueSupplier, parse, parse_args
from .version import __version__

__all__ = [
    "ArgumentError",
    "ArgumentHandler",
    "FlagstreamError",
    "ValueSupplier",
    "logger",
    "parse",
    "parse_args",
    "__version__",
]
