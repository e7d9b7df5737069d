# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Wrap-around selection over suggestion and history lists.

Both helpers return the item to select given the currently selected one:
- an empty list keeps `current`
- a `current` missing from the list selects the last (previous) or first (next) item
- stepping past either end wraps to the other end
"""
from __future__ import annotations

from typing import Sequence


def previous_from_list(items: Sequence[str], current: str) -> str:
    if not items:
        return current
    if current not in items:
        return items[-1]
    index = items.index(current)
    return items[index - 1] if index > 0 else items[-1]


def next_from_list(items: Sequence[str], current: str) -> str:
    if not items:
        return current
    if current not in items:
        return items[0]
    index = items.index(current)
    return items[index + 1] if index < len(items) - 1 else items[0]
