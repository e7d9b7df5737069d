# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the collaborators consulted by the parsing core.

Protocols:
- CommandResolverProtocol: Resolves a command name to a handle and supplies
  per-argument suggestion lists.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandResolverProtocol(Protocol):
    def resolve(self, name: str) -> Any | None: ...

    def argument_suggestions(
        self, command: Any, ordinal: int
    ) -> Sequence[str] | None: ...
