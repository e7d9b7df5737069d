# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
History of accepted command lines.

`CommandHistory` is a fixed-capacity recency list: most recent first, the
oldest entry is evicted on overflow, and pushing an entry that is already
present changes nothing. `ScopeHistory` exposes it to prompt_toolkit so the
Up/Down keys of a `PromptSession` walk the same list.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from prompt_toolkit.history import History

from cmdscope.logger import logger
from cmdscope.tokenizer import clean

DEFAULT_CAPACITY = 10


class CommandHistory:
    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, entries: Iterable[str] | None = None
    ) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self._entries: deque[str] = deque()
        for entry in reversed(list(entries or [])):
            self.push(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, command: object) -> bool:
        return command in self._entries

    @property
    def entries(self) -> list[str]:
        """Entries, most recent first."""
        return list(self._entries)

    def push(self, command: str) -> bool:
        """Add `command` as the most recent entry unless it is already present."""
        if not command or command in self._entries:
            return False
        if len(self._entries) >= self.capacity:
            evicted = self._entries.pop()
            logger.debug("History full, evicted %r", evicted)
        self._entries.appendleft(command)
        return True

    def clear(self) -> None:
        self._entries.clear()


class ScopeHistory(History):
    """prompt_toolkit `History` backed by a `CommandHistory`."""

    def __init__(self, store: CommandHistory | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else CommandHistory()

    def load_history_strings(self) -> Iterable[str]:
        yield from self.store.entries

    def store_string(self, string: str) -> None:
        self.store.push(clean(string))

    def append_string(self, string: str) -> None:
        self.store_string(string)
        self._loaded_strings = self.store.entries
