# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `BufferModel`, the parsed view of a multi-command input line.

The model is built from a canonical snapshot of the input buffer and kept
consistent under single-token renames without re-parsing:

- Build: every sub-command becomes a `CommandScope`; word offsets are found by
  scanning forward from the end of the previous word, never by searching the
  whole buffer, so repeated words keep their own ranges.
- Query: map a cursor position to its scope, word and argument ordinal.
- Mutation: rename a command name or an argument, shift the offsets of every
  token after it and re-serialize the snapshot.

One model is owned by each input field; nothing here is process-global.

Positions outside `[0, len(snapshot)]`, unresolved command names and empty
sub-commands are represented or reported as "not found", never raised.
"""
from __future__ import annotations

from typing import Any, Iterator, Sequence

from cmdscope.logger import logger
from cmdscope.protocols import CommandResolverProtocol
from cmdscope.scope import Argument, CommandScope, TokenRange
from cmdscope.tokenizer import (
    DELIMITER,
    clean,
    is_single_token,
    split_commands,
    split_words,
)

NOT_FOUND = -1


class BufferModel:
    """
    Parsed model of one input line.

    Attributes:
        snapshot (str): The canonical text the scopes describe.
        scopes (list[CommandScope]): Sub-commands in left-to-right order.
        registry (CommandResolverProtocol | None): Resolves command names.
    """

    def __init__(
        self,
        snapshot: str = "",
        registry: CommandResolverProtocol | None = None,
    ) -> None:
        self.registry = registry
        self.snapshot: str = clean(snapshot)
        self.scopes: list[CommandScope] = []
        self.rebuild()

    def __iter__(self) -> Iterator[CommandScope]:
        return iter(self.scopes)

    def __len__(self) -> int:
        return len(self.scopes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferModel):
            return NotImplemented
        return self.snapshot == other.snapshot and self.scopes == other.scopes

    def __repr__(self) -> str:
        return f"BufferModel(snapshot={self.snapshot!r}, scopes={len(self.scopes)})"

    def _resolve(self, name: str) -> Any | None:
        if not name or self.registry is None:
            return None
        return self.registry.resolve(name)

    def _find_word(self, word: str, offset: int) -> int:
        if self.snapshot.startswith(word, offset):
            return offset
        position = self.snapshot.find(word, offset)
        if position < 0:
            logger.debug("Word %r not found after offset %d", word, offset)
            return offset
        return position

    def _build_scope(self, index: int, sub_command: str, offset: int) -> CommandScope:
        words = split_words(sub_command)
        scope = CommandScope(
            raw_name=words[0],
            scope_index=index,
            range=TokenRange(offset, offset),
            resolved_command=self._resolve(words[0]),
        )

        cursor = offset
        for ordinal, word in enumerate(words):
            start = self._find_word(word, cursor)
            end = start + len(word)
            scope.arguments.append(
                Argument(
                    text=word,
                    ordinal=ordinal,
                    range=TokenRange(start, end),
                    is_command_name=ordinal == 0,
                )
            )
            cursor = end + 1

        scope.range.end = scope.arguments[-1].range.end
        return scope

    def rebuild(self) -> None:
        """Rebuild every scope from the current snapshot."""
        self.scopes = []
        offset = 0
        for index, sub_command in enumerate(split_commands(self.snapshot)):
            self.scopes.append(self._build_scope(index, sub_command, offset))
            offset += len(sub_command) + len(DELIMITER)
        logger.debug("Parsed %d scope(s) from %r", len(self.scopes), self.snapshot)

    def serialize(self) -> str:
        """Join words with single spaces and scopes with the delimiter."""
        return DELIMITER.join(scope.text for scope in self.scopes)

    def _in_bounds(self, position: int) -> bool:
        return 0 <= position <= len(self.snapshot)

    def scope_at(self, position: int) -> CommandScope | None:
        """Return the scope whose range contains `position`, or None."""
        if not self._in_bounds(position):
            return None
        for scope in self.scopes:
            if position in scope.range:
                return scope
        return None

    def argument_at(
        self, position: int, scope: CommandScope | None = None
    ) -> Argument | None:
        """Return the word at `position` (command name included), or None."""
        if scope is None:
            scope = self.scope_at(position)
        if scope is None or not self._in_bounds(position):
            return None
        return scope.get_argument(position)

    def argument_ordinal_at(self, position: int) -> int:
        """
        Return the 1-based ordinal of the argument at `position`.

        Returns `NOT_FOUND` when `position` is outside every argument, including
        when it is on the command-name token.
        """
        argument = self.argument_at(position)
        if argument is None or argument.is_command_name:
            return NOT_FOUND
        return argument.ordinal

    def is_command_name_at(self, position: int) -> bool:
        argument = self.argument_at(position)
        return argument is not None and argument.is_command_name

    def command_at(self, position: int) -> Any | None:
        scope = self.scope_at(position)
        if scope is None:
            return None
        return scope.resolved_command

    def argument_suggestions_at(self, position: int) -> Sequence[str] | None:
        """Return the registry's suggestions for the argument at `position`."""
        scope = self.scope_at(position)
        ordinal = self.argument_ordinal_at(position)
        if scope is None or not scope.is_resolved or ordinal == NOT_FOUND:
            return None
        if self.registry is None:
            return None
        return self.registry.argument_suggestions(scope.resolved_command, ordinal)

    def _reparse(self) -> None:
        self.snapshot = clean(self.serialize())
        self.rebuild()

    def _shift_scopes_after(self, scope: CommandScope, delta: int) -> None:
        for later in self.scopes[scope.scope_index + 1 :]:
            later.range.shift(delta)
            for argument in later.arguments:
                argument.range.shift(delta)

    def rename_command(self, position: int, new_name: str) -> BufferModel:
        """
        Rename the command of the scope at `position`.

        The name token keeps its start; every later token in the buffer moves by
        the length difference. The command handle is resolved again and may
        become None.

        A name that is empty or holds a separator or delimiter changes the token
        structure, so the snapshot is cleaned and rebuilt instead.
        """
        scope = self.scope_at(position)
        if scope is None:
            logger.debug("rename_command: no scope at position %d", position)
            return self

        if not is_single_token(new_name):
            scope.name_token.text = new_name
            self._reparse()
            logger.debug("Rebuilt after renaming command to %r", new_name)
            return self

        name_token = scope.name_token
        delta = len(new_name) - len(name_token.text)
        name_token.text = new_name
        name_token.range.end += delta
        scope.raw_name = new_name
        scope.resolved_command = self._resolve(new_name)

        for argument in scope.arguments[1:]:
            argument.range.shift(delta)
        scope.range.end += delta
        self._shift_scopes_after(scope, delta)

        self.snapshot = self.serialize()
        logger.debug("Renamed command of scope %d to %r", scope.scope_index, new_name)
        return self

    def rename_argument(self, position: int, new_text: str) -> BufferModel:
        """
        Replace the text of the argument at `position`.

        Later arguments of the same scope and every later scope move by the
        length difference; the owning scope keeps its start. Renaming the
        command-name token is the same as `rename_command`.
        Empty or multi-word text rebuilds the model from the cleaned snapshot.
        """
        scope = self.scope_at(position)
        argument = self.argument_at(position, scope)
        if scope is None or argument is None:
            logger.debug("rename_argument: no argument at position %d", position)
            return self
        if argument.is_command_name:
            return self.rename_command(position, new_text)

        if not is_single_token(new_text):
            argument.text = new_text
            self._reparse()
            logger.debug("Rebuilt after renaming argument to %r", new_text)
            return self

        delta = len(new_text) - len(argument.text)
        argument.text = new_text
        argument.range.end += delta

        for later in scope.arguments[argument.ordinal + 1 :]:
            later.range.shift(delta)
        scope.range.end += delta
        self._shift_scopes_after(scope, delta)

        self.snapshot = self.serialize()
        logger.debug(
            "Renamed argument %d of scope %d to %r",
            argument.ordinal,
            scope.scope_index,
            new_text,
        )
        return self


def parse(raw_text: str, registry: CommandResolverProtocol | None = None) -> BufferModel:
    """Clean `raw_text` and build its model."""
    return BufferModel(raw_text, registry)


def scope_at(model: BufferModel, position: int) -> CommandScope | None:
    return model.scope_at(position)


def argument_ordinal_at(model: BufferModel, position: int) -> int:
    return model.argument_ordinal_at(position)


def rename_command(model: BufferModel, position: int, new_name: str) -> BufferModel:
    return model.rename_command(position, new_name)


def rename_argument(model: BufferModel, position: int, new_text: str) -> BufferModel:
    return model.rename_argument(position, new_text)


def serialize(model: BufferModel) -> str:
    return model.serialize()
