# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandLine`, the per-input-field controller for a command entry box.

An input widget owns the raw text and the cursor; it forwards every event to
its `CommandLine`, which keeps one `BufferModel` for that field and answers:

- `on_edit()`: a keystroke changed the text or moved the cursor. Stray spaces
  are collapsed and the suggestion list is refreshed.
- `complete()`: Tab. Applies the highlighted suggestion, or the auto-fill for
  the word being typed.
- `select_previous()` / `select_next()`: Up/Down through the suggestion list.
- `submit()`: Enter. Records the canonical line in the history and resets.

While the first word is typed the suggestion list is the command history;
afterwards it holds the resolved command's suggestions for the current
argument, filtered by what was typed.
"""
from __future__ import annotations

from cmdscope.buffer import BufferModel, parse
from cmdscope.history import CommandHistory
from cmdscope.logger import logger
from cmdscope.navigation import next_from_list, previous_from_list
from cmdscope.registry import CommandRegistry
from cmdscope.suggestions import (
    MAX_SUGGESTIONS,
    appropriate_suggestion,
    filter_suggestions,
    last_command_words,
    rebuild_with_suggestion,
)
from cmdscope.tokenizer import clean, is_single_token, needs_cleaning, split_words


class CommandLine:
    """
    Controller state for one command input field.

    Args:
        registry (CommandRegistry): Commands the line can refer to.
        history (CommandHistory | None): Accepted lines, shared between fields
            if the caller passes the same instance.
        max_suggestions (int): Cap on argument suggestions shown at once.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        history: CommandHistory | None = None,
        max_suggestions: int = MAX_SUGGESTIONS,
    ) -> None:
        self.registry = registry
        self.history = history if history is not None else CommandHistory()
        self.max_suggestions = max_suggestions
        self.text: str = ""
        self.cursor: int = 0
        self.model: BufferModel = BufferModel("", registry)
        self.suggestions: list[str] = []
        self.selected: str = ""

    def __str__(self) -> str:
        return f"CommandLine(text={self.text!r}, cursor={self.cursor})"

    @property
    def auto_fill(self) -> str:
        """Completion for the word at the end of the line, or ""."""
        return appropriate_suggestion(self.registry, self.text)

    def on_edit(self, text: str, cursor: int) -> str:
        """
        Take a new text/cursor snapshot from the widget.

        Returns:
            str: The text the widget should display, cleaned if it held
            double spaces or spaces around a delimiter.
        """
        if cursor != self.cursor:
            self.selected = ""
        if needs_cleaning(text):
            text = clean(text, strip=False)
            cursor = min(cursor, len(text))
        self.text = text
        self.cursor = cursor
        self.model = parse(text, self.registry)
        self.refresh_suggestions()
        return text

    def refresh_suggestions(self) -> None:
        words = last_command_words(self.text)
        if len(words) == 1:
            self.suggestions = self.history.entries
            return

        command = self.registry.resolve(words[0])
        suggestions = self.registry.argument_suggestions(command, len(words) - 1)
        if suggestions is None:
            self.suggestions = []
            return
        if words[-1] and words[-1] in self.suggestions:
            return
        self.suggestions = filter_suggestions(
            suggestions, words[-1], self.max_suggestions
        )

    def select_previous(self) -> str:
        self.selected = previous_from_list(self.suggestions, self.selected)
        return self.selected

    def select_next(self) -> str:
        self.selected = next_from_list(self.suggestions, self.selected)
        return self.selected

    def complete(self) -> str:
        """Apply the selected suggestion or the auto-fill and return the new text."""
        if self.selected:
            selected, self.selected = self.selected, ""
            if self.registry.resolve(split_words(selected)[0]) is not None:
                return self._set_text(selected)
            return self._apply_suggestion(selected)

        suggestion = self.auto_fill
        if suggestion and suggestion != self.text:
            return self._apply_suggestion(suggestion)
        return self.text

    def _apply_suggestion(self, suggestion: str) -> str:
        if (
            self.text
            and self.text == self.model.snapshot
            and is_single_token(suggestion)
        ):
            self.model.rename_argument(len(self.model.snapshot), suggestion)
            self.text = self.model.snapshot
            self.cursor = len(self.text)
            self.refresh_suggestions()
            return self.text
        return self._set_text(rebuild_with_suggestion(self.text, suggestion))

    def _set_text(self, text: str) -> str:
        self.text = text
        self.cursor = len(text)
        self.model = parse(text, self.registry)
        self.refresh_suggestions()
        return self.text

    def submit(self) -> str:
        """Record the canonical line in the history and reset the field."""
        line = clean(self.text)
        if self.history.push(line):
            logger.debug("Added %r to history", line)
        self.text = ""
        self.cursor = 0
        self.selected = ""
        self.model = BufferModel("", self.registry)
        self.suggestions = self.history.entries
        return line
