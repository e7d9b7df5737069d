# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command registry consulted by the parsing core.

`CommandRegistry.resolve()` maps a typed name (or alias) to its
`CommandDescriptor` with a case-insensitive exact lookup, and
`CommandRegistry.argument_suggestions()` supplies the completion candidates for
a 1-based argument ordinal. The registry never executes anything.
"""
from __future__ import annotations

from typing import Callable, Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field

from cmdscope.exceptions import CommandAlreadyExistsError
from cmdscope.logger import logger
from cmdscope.utils import CaseInsensitiveDict


class CommandDescriptor(BaseModel):
    """
    Describes a command the input line can refer to.

    Attributes:
        name (str): Canonical command name.
        description (str): Short description shown next to completions.
        aliases (list[str]): Alternate names resolving to this command.
        arguments (list[list[str]]): Static suggestions, one list per argument;
            `arguments[0]` holds the suggestions for ordinal 1.
        suggestion_provider (Callable[[int], Sequence[str] | None] | None):
            Dynamic suggestions by ordinal, consulted before `arguments`.
    """

    name: str
    description: str = ""
    aliases: list[str] = Field(default_factory=list)
    arguments: list[list[str]] = Field(default_factory=list)
    suggestion_provider: Callable[[int], Sequence[str] | None] | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def get_argument_suggestions(self, ordinal: int) -> list[str] | None:
        if self.suggestion_provider is not None:
            suggestions = self.suggestion_provider(ordinal)
            if suggestions is not None:
                return list(suggestions)
        if 1 <= ordinal <= len(self.arguments):
            return list(self.arguments[ordinal - 1])
        return None

    def __str__(self) -> str:
        return f"CommandDescriptor(name='{self.name}', aliases={self.aliases})"


class CommandRegistry:
    """Registered commands, looked up case-insensitively by name or alias."""

    def __init__(self, commands: list[CommandDescriptor] | None = None) -> None:
        self.commands: dict[str, CommandDescriptor] = {}
        self._name_map: CaseInsensitiveDict = CaseInsensitiveDict()
        for command in commands or []:
            self.register(command)

    def __contains__(self, name: object) -> bool:
        return name in self._name_map

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self.commands.values())

    def register(self, command: CommandDescriptor) -> CommandDescriptor:
        """
        Register a command under its name and aliases.

        Raises:
            CommandAlreadyExistsError: If the name or an alias is already taken.
        """
        collisions = [
            name for name in [command.name, *command.aliases] if name in self._name_map
        ]
        if collisions:
            raise CommandAlreadyExistsError(
                f"Command name(s) {collisions} already registered."
            )
        self.commands[command.name] = command
        for name in [command.name, *command.aliases]:
            self._name_map[name] = command
        logger.debug("Registered command '%s' (aliases=%s)", command.name, command.aliases)
        return command

    def add_command(
        self,
        name: str,
        description: str = "",
        *,
        aliases: list[str] | None = None,
        arguments: list[list[str]] | None = None,
        suggestion_provider: Callable[[int], Sequence[str] | None] | None = None,
    ) -> CommandDescriptor:
        return self.register(
            CommandDescriptor(
                name=name,
                description=description,
                aliases=aliases or [],
                arguments=arguments or [],
                suggestion_provider=suggestion_provider,
            )
        )

    def resolve(self, name: str) -> CommandDescriptor | None:
        if not name:
            return None
        return self._name_map.get(name)

    def argument_suggestions(
        self, command: CommandDescriptor | None, ordinal: int
    ) -> list[str] | None:
        if command is None:
            return None
        return command.get_argument_suggestions(ordinal)

    def names(self, include_aliases: bool = False) -> list[str]:
        names = []
        for command in self.commands.values():
            names.append(command.name)
            if include_aliases:
                names.extend(command.aliases)
        return names
