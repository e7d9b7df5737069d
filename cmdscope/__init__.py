"""
cmdscope

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .buffer import (
    NOT_FOUND,
    BufferModel,
    argument_ordinal_at,
    parse,
    rename_argument,
    rename_command,
    scope_at,
    serialize,
)
from .history import CommandHistory
from .registry import CommandDescriptor, CommandRegistry
from .scope import Argument, CommandScope, TokenRange
from .tokenizer import clean, tokenize

logger = logging.getLogger("cmdscope")


__all__ = [
    "NOT_FOUND",
    "Argument",
    "BufferModel",
    "CommandDescriptor",
    "CommandHistory",
    "CommandRegistry",
    "CommandScope",
    "TokenRange",
    "argument_ordinal_at",
    "clean",
    "parse",
    "rename_argument",
    "rename_command",
    "scope_at",
    "serialize",
    "tokenize",
]
