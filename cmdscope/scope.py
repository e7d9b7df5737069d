# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Data model for a parsed command line.

- `TokenRange`: half-open `[start, end)` character offsets into a buffer snapshot.
- `Argument`: one word of a sub-command; ordinal 0 is the command name.
- `CommandScope`: one sub-command with its resolved command handle and words.

Containment checks treat `end` as inside the range, so a cursor sitting right
after a word still targets that word.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cmdscope.tokenizer import SEPARATOR


@dataclass
class TokenRange:
    """Half-open interval of character offsets."""

    start: int = 0
    end: int = 0

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, int):
            return False
        return self.start <= position <= self.end

    def __len__(self) -> int:
        return self.end - self.start

    def shift(self, delta: int) -> None:
        self.start += delta
        self.end += delta


@dataclass
class Argument:
    """
    A single word of a sub-command.

    Attributes:
        text (str): The word as it appears in the buffer.
        ordinal (int): Position within the sub-command, 0 for the command name.
        range (TokenRange): Offsets of the word in the buffer snapshot.
        is_command_name (bool): True for the ordinal 0 word.
    """

    text: str
    ordinal: int
    range: TokenRange = field(default_factory=TokenRange)
    is_command_name: bool = False

    @property
    def is_argument(self) -> bool:
        return not self.is_command_name


@dataclass
class CommandScope:
    """
    The structured representation of one sub-command.

    `resolved_command` is None when `raw_name` matches no registered command;
    the scope is still kept so editing can continue. `arguments` always starts
    with the command-name token, even when that name is empty.
    """

    raw_name: str
    scope_index: int
    range: TokenRange = field(default_factory=TokenRange)
    resolved_command: Any | None = None
    arguments: list[Argument] = field(default_factory=list)

    @property
    def argument_count(self) -> int:
        return max(len(self.arguments) - 1, 0)

    @property
    def name_token(self) -> Argument:
        return self.arguments[0]

    @property
    def is_resolved(self) -> bool:
        return self.resolved_command is not None

    @property
    def words(self) -> list[str]:
        return [argument.text for argument in self.arguments]

    @property
    def text(self) -> str:
        return SEPARATOR.join(self.words)

    def get_argument(self, position: int) -> Argument | None:
        """Return the word whose range contains `position`, or None."""
        for argument in self.arguments:
            if position in argument.range:
                return argument
        return None
