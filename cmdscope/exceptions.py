# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the custom exception classes used by cmdscope.

The parsing core never raises: unresolved commands, out-of-range cursor
positions and malformed delimiters are all represented in the model. These
exceptions cover the collaborators around it (registry and config loading).

Exception Hierarchy:
- CmdScopeError
    ├── CommandAlreadyExistsError
    └── ConfigError
"""


class CmdScopeError(Exception):
    """Base exception for cmdscope."""


class CommandAlreadyExistsError(CmdScopeError):
    """Exception raised when a command name or alias is already registered."""


class ConfigError(CmdScopeError):
    """Exception raised when a configuration file cannot be turned into a registry."""
