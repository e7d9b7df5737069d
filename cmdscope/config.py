# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for cmdscope command registries."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cmdscope.exceptions import CommandAlreadyExistsError, ConfigError
from cmdscope.history import DEFAULT_CAPACITY, CommandHistory
from cmdscope.logger import logger
from cmdscope.registry import CommandDescriptor, CommandRegistry
from cmdscope.tokenizer import DELIMITER, SEPARATOR


class RawCommand(BaseModel):
    """Raw command model for cmdscope configuration."""

    name: str
    description: str = ""
    aliases: list[str] = Field(default_factory=list)
    arguments: list[list[str]] = Field(default_factory=list)

    @field_validator("name", "aliases")
    @classmethod
    def validate_single_word(cls, value: str | list[str]) -> str | list[str]:
        names = [value] if isinstance(value, str) else value
        for name in names:
            if not name or SEPARATOR in name or DELIMITER in name:
                raise ValueError(
                    f"Command names must be single words without '{DELIMITER}': {name!r}"
                )
        return value

    @field_validator("arguments", mode="before")
    @classmethod
    def validate_arguments(cls, value: Any) -> list[list[str]]:
        if not isinstance(value, list):
            raise ValueError("arguments must be a list of suggestion lists.")
        return [[str(item) for item in suggestions] for suggestions in value]

    def to_descriptor(self) -> CommandDescriptor:
        return CommandDescriptor(**self.model_dump())


class CmdScopeConfig(BaseModel):
    """cmdscope configuration model."""

    prompt: str = "> "
    history_size: int = DEFAULT_CAPACITY
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("history_size")
    @classmethod
    def validate_history_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("history_size must be at least 1.")
        return value

    def to_registry(self) -> CommandRegistry:
        return CommandRegistry([command.to_descriptor() for command in self.commands])

    def to_history(self) -> CommandHistory:
        return CommandHistory(capacity=self.history_size)


def loader(file_path: Path | str) -> CmdScopeConfig:
    """
    Load cmdscope configuration from a YAML or TOML file.

    The file should contain a dictionary with a list of commands. Each command
    has a `name` and optionally `description`, `aliases` and `arguments` (one
    list of suggestions per argument position).

    Args:
        file_path (str | Path): Path to the config file (YAML or TOML).

    Returns:
        CmdScopeConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ConfigError: If the file content is not a valid configuration.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("commands"), list
    ):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'teleport'\n"
            "    aliases: ['tp']\n"
            "    arguments: [['alice', 'bob']]"
        )

    try:
        config = CmdScopeConfig(**raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}: {error}") from error

    try:
        config.to_registry()
    except CommandAlreadyExistsError as error:
        raise ConfigError(f"Duplicate command in {path}: {error}") from error
    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config
