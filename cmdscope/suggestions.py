# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Auto-fill helpers for the word being typed at the end of the line.

These work on the last sub-command of the raw input text, including a
trailing space that starts a new, still empty, word.
"""
from __future__ import annotations

from typing import Sequence

from cmdscope.registry import CommandRegistry
from cmdscope.tokenizer import DELIMITER, SEPARATOR, split_words

MAX_SUGGESTIONS = 10


def last_command_words(text: str) -> list[str]:
    """Words of the last sub-command; the last word is empty after a trailing space."""
    return split_words(text.split(DELIMITER)[-1])


def current_word_index(text: str) -> int:
    """1-based index of the word being typed in the last sub-command."""
    return len(last_command_words(text))


def auto_fill_command(registry: CommandRegistry, stub: str) -> str:
    """
    Complete a partially typed command name.

    Returns `stub` when it already names a command, otherwise the first
    registered name containing it (case-insensitive), otherwise "".
    """
    if registry.resolve(stub) is not None:
        return stub
    lowered = stub.lower()
    for name in registry.names():
        if lowered in name.lower():
            return name
    return ""


def filter_suggestions(
    suggestions: Sequence[str], stub: str, limit: int | None = MAX_SUGGESTIONS
) -> list[str]:
    """Keep suggestions containing `stub` (case-insensitive), at most `limit`."""
    lowered = stub.lower()
    filtered = [item for item in suggestions if lowered in item.lower()]
    if limit is not None:
        return filtered[:limit]
    return filtered


def appropriate_suggestion(registry: CommandRegistry, text: str) -> str:
    """Best single completion for the last word of `text`, or ""."""
    words = last_command_words(text)
    index = len(words)
    if index == 1:
        return auto_fill_command(registry, words[-1])

    command = registry.resolve(words[0])
    if command is None:
        return ""
    suggestions = registry.argument_suggestions(command, index - 1)
    if not suggestions:
        return ""
    filtered = filter_suggestions(suggestions, words[-1], limit=1)
    return filtered[0] if filtered else ""


def rebuild_with_suggestion(text: str, suggestion: str) -> str:
    """Replace the last word of the last sub-command with `suggestion`."""
    sub_commands = text.split(DELIMITER)
    words = split_words(sub_commands[-1])
    words[-1] = suggestion
    sub_commands[-1] = SEPARATOR.join(words)
    return DELIMITER.join(sub_commands)
