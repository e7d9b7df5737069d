"""Walk a CommandLine controller through a typing session."""
from cmdscope.command_line import CommandLine
from cmdscope.config import loader
from cmdscope.console import console
from cmdscope.debug import render_model

config = loader("examples/cmdscope.yaml")
line = CommandLine(config.to_registry(), config.to_history())

for typed in ["gi", "give al", "give alice  w", "give alice weapon;tp "]:
    text = line.on_edit(typed, len(typed))
    console.print(f"typed={typed!r} shown={text!r} auto-fill={line.auto_fill!r}")
    console.print(f"completed={line.complete()!r} suggestions={line.suggestions}")

render_model(line.model, line.cursor)
console.print(f"submitted={line.submit()!r} history={line.history.entries}")
