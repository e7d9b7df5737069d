# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandPrompt`, a prompt_toolkit session for multi-command lines.

The session is wired with:
- `ScopeCompleter` for command-name and argument completion
- `ScopeHistory`, so Up/Down walk the shared `CommandHistory`
- a bottom toolbar showing the auto-fill for the word being typed

Accepted lines are returned in canonical form. Nothing is executed.
"""
from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import AnyFormattedText, FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from cmdscope.completer import ScopeCompleter
from cmdscope.history import CommandHistory, ScopeHistory
from cmdscope.registry import CommandRegistry
from cmdscope.suggestions import appropriate_suggestion, last_command_words
from cmdscope.tokenizer import clean


class CommandPrompt:
    def __init__(
        self,
        registry: CommandRegistry,
        history: CommandHistory | None = None,
        message: AnyFormattedText = "> ",
        show_suggestion: bool = True,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.registry = registry
        self.history = history if history is not None else CommandHistory()
        self.session: PromptSession = PromptSession(
            message=message,
            completer=ScopeCompleter(registry),
            history=ScopeHistory(self.history),
            complete_while_typing=True,
            bottom_toolbar=self.render_suggestion if show_suggestion else None,
            input=input,
            output=output,
        )

    def render_suggestion(self) -> AnyFormattedText:
        """Toolbar text with the auto-fill for the current buffer, if any."""
        text = self.session.default_buffer.text
        if not text:
            return ""
        suggestion = appropriate_suggestion(self.registry, text)
        if not suggestion or suggestion == last_command_words(text)[-1]:
            return ""
        return FormattedText([("class:bottom-toolbar.text", f"Suggestion: {suggestion}")])

    def prompt(self) -> str:
        return clean(self.session.prompt())

    async def prompt_async(self) -> str:
        return clean(await self.session.prompt_async())
