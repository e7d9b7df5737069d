# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""Rich rendering of a `BufferModel` for inspecting offsets while typing."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdscope.buffer import NOT_FOUND, BufferModel
from cmdscope.console import console as default_console
from cmdscope.logger import logger


def build_model_table(model: BufferModel, cursor: int | None = None) -> Table:
    """One row per word: scope, ordinal, text, range and resolution status."""
    table = Table(
        title=f"Buffer: {escape(repr(model.snapshot))}", expand=True, box=box.SIMPLE
    )
    table.add_column("Scope", justify="right", style="dim")
    table.add_column("Ordinal", justify="right")
    table.add_column("Text", style="bold cyan")
    table.add_column("Range", justify="right", style="dim")
    table.add_column("Status")

    for scope in model:
        for argument in scope.arguments:
            if argument.is_command_name:
                status = "[green]resolved" if scope.is_resolved else "[red]unresolved"
            else:
                status = ""
            marker = "▶ " if cursor is not None and cursor in argument.range else ""
            table.add_row(
                str(scope.scope_index),
                str(argument.ordinal),
                f"{marker}{escape(argument.text)}",
                f"[{argument.range.start}, {argument.range.end})",
                status,
            )
    return table


def describe_position(model: BufferModel, position: int) -> str:
    scope = model.scope_at(position)
    if scope is None:
        return "No scope found"
    argument = model.argument_at(position, scope)
    if argument is None:
        return "No argument found"
    ordinal = model.argument_ordinal_at(position)
    index = "command name" if ordinal == NOT_FOUND else str(ordinal)
    return f"Scope: {scope.text} Argument: {argument.text} Argument index: {index}"


def render_model(
    model: BufferModel, cursor: int | None = None, console: Console | None = None
) -> None:
    console = console or default_console
    console.print(build_model_table(model, cursor))
    console.print(f"Serialized buffer: {model.serialize()!r}", markup=False)
    if cursor is not None:
        description = describe_position(model, cursor)
        logger.debug("Cursor %d -> %s", cursor, description)
        console.print(description, markup=False)
