# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ScopeCompleter`, a prompt_toolkit completer for multi-command lines.

The text before the cursor is parsed into a `BufferModel` and the Query Layer
decides what is being typed:
- the command-name token of the last scope (or an empty scope after `;`)
  completes registered command names and aliases
- an argument token, or a fresh word after a trailing space, completes the
  resolved command's suggestions for that ordinal

Unresolved commands and ordinals without suggestions yield nothing.
"""
from __future__ import annotations

import os
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cmdscope.buffer import NOT_FOUND, parse
from cmdscope.logger import logger
from cmdscope.registry import CommandRegistry
from cmdscope.tokenizer import DELIMITER, SEPARATOR


class ScopeCompleter(Completer):
    """
    Prompt Toolkit completer for command-line input.

    Args:
        registry (CommandRegistry): Resolves command names and supplies
            argument suggestions.
    """

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Yield completions for the word at the end of `document.text_before_cursor`.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, unused.

        Yields:
            Completion: Matches for the current stub.
        """
        text = document.text_before_cursor
        model = parse(text, self.registry)
        position = len(model.snapshot)
        scope = model.scope_at(position)

        if scope is None or text.endswith(DELIMITER) or not scope.raw_name:
            yield from self._yield_lcp_completions(self._suggest_commands(""), "")
            return

        if text.endswith(SEPARATOR):
            ordinal = scope.argument_count + 1
            stub = ""
        elif model.is_command_name_at(position):
            stub = scope.raw_name
            yield from self._yield_lcp_completions(self._suggest_commands(stub), stub)
            return
        else:
            ordinal = model.argument_ordinal_at(position)
            argument = model.argument_at(position, scope)
            stub = argument.text if argument else ""

        if ordinal == NOT_FOUND or not scope.is_resolved:
            return

        try:
            suggestions = self.registry.argument_suggestions(
                scope.resolved_command, ordinal
            )
        except Exception as error:
            logger.debug("Suggestion provider for '%s' failed: %s", scope.raw_name, error)
            return
        if suggestions:
            yield from self._yield_lcp_completions(suggestions, stub)

    def _suggest_commands(self, prefix: str) -> list[str]:
        """Command names and aliases starting with `prefix` (case-insensitive)."""
        lowered = prefix.lower()
        return [
            name
            for name in self.registry.names(include_aliases=True)
            if name.lower().startswith(lowered)
        ]

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.

        Args:
            suggestions (list[str]): The raw suggestions to consider.
            stub (str): The currently typed prefix (used to offset insertion).

        Yields:
            Completion: Completion objects for the Prompt Toolkit menu.
        """
        lowered = stub.lower()
        matches = [s for s in suggestions if s.lower().startswith(lowered)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(matches[0], start_position=-len(stub), display=matches[0])
        elif len(lcp) > len(stub):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
        else:
            for match in matches:
                yield Completion(match, start_position=-len(stub), display=match)
