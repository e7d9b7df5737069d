import pytest

from cmdscope.buffer import parse
from cmdscope.command_line import CommandLine
from cmdscope.history import CommandHistory
from cmdscope.registry import CommandRegistry


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.add_command("go")
    registry.add_command("teleport", aliases=["tp"], arguments=[["alice", "bob"]])
    registry.add_command(
        "give", arguments=[["weapon", "armor", "ammo"], ["1", "5", "10"]]
    )
    registry.add_command("many", arguments=[[f"item{n}" for n in range(20)]])
    return registry


@pytest.fixture
def history():
    return CommandHistory(entries=["go 1", "teleport alice"])


@pytest.fixture
def line(registry, history):
    return CommandLine(registry, history)


def type_text(line, text):
    return line.on_edit(text, len(text))


def test_on_edit_cleans_stray_spaces(line):
    assert type_text(line, "go  1") == "go 1"
    assert line.cursor == 4
    assert line.model.snapshot == "go 1"
    assert type_text(line, "go 1 ; tp") == "go 1;tp"


def test_on_edit_keeps_trailing_space_while_typing(line):
    assert type_text(line, "give ") == "give "
    assert line.model.snapshot == "give"


def test_first_word_suggests_history(line, history):
    type_text(line, "g")
    assert line.suggestions == history.entries


def test_argument_suggestions_are_filtered(line):
    type_text(line, "give m")
    assert line.suggestions == ["armor", "ammo"]


def test_argument_suggestions_are_capped(line):
    type_text(line, "many ")
    assert len(line.suggestions) == 10


def test_unresolved_command_has_no_suggestions(line):
    type_text(line, "foo b")
    assert line.suggestions == []


def test_complete_command_name(line, registry):
    type_text(line, "tele")
    assert line.auto_fill == "teleport"
    assert line.complete() == "teleport"
    assert line.cursor == len("teleport")
    assert line.model == parse("teleport", registry)


def test_complete_argument(line, registry):
    type_text(line, "give we")
    assert line.complete() == "give weapon"
    assert line.model == parse("give weapon", registry)


def test_complete_after_trailing_space(line):
    type_text(line, "give ")
    assert line.complete() == "give weapon"


def test_complete_in_second_scope(line, registry):
    type_text(line, "go 1;give ar")
    assert line.complete() == "go 1;give armor"
    assert line.model == parse("go 1;give armor", registry)


def test_complete_without_suggestion_keeps_text(line):
    type_text(line, "foo x")
    assert line.complete() == "foo x"


def test_navigate_history_and_complete_full_line(line):
    line.on_edit("", 0)
    assert line.select_next() == "go 1"
    assert line.select_next() == "teleport alice"
    assert line.select_next() == "go 1"
    assert line.select_previous() == "teleport alice"
    assert line.complete() == "teleport alice"
    assert line.selected == ""


def test_complete_selected_argument_suggestion(line):
    type_text(line, "give ")
    assert line.select_previous() == "ammo"
    assert line.complete() == "give ammo"
    # The list stays put so navigation can continue from the inserted value.
    assert line.suggestions == ["weapon", "armor", "ammo"]


def test_cursor_move_clears_selection(line):
    type_text(line, "give ")
    line.select_next()
    assert line.selected == "weapon"
    line.on_edit("give ", 2)
    assert line.selected == ""


def test_submit_records_canonical_line(line, history):
    type_text(line, "go  1 ;tp 2")
    assert line.submit() == "go 1;tp 2"
    assert history.entries[0] == "go 1;tp 2"
    assert line.text == ""
    assert len(line.model) == 0

    type_text(line, "go 1;tp 2")
    line.submit()
    assert history.entries.count("go 1;tp 2") == 1


def test_submit_empty_line_is_not_recorded(line, history):
    before = history.entries
    assert line.submit() == ""
    assert history.entries == before


def test_complete_unresolved_history_line_reparses(registry):
    line = CommandLine(registry, CommandHistory(entries=["zap 1;go 2"]))
    type_text(line, "g")
    assert line.select_next() == "zap 1;go 2"

    assert line.complete() == "zap 1;go 2"
    assert len(line.model) == 2
    assert line.model.scopes[0].resolved_command is None
    assert line.model == parse(line.text, registry)


def test_complete_multi_word_argument_suggestion(registry):
    registry.add_command("say", arguments=[["hello world", "bye"]])
    line = CommandLine(registry, CommandHistory())
    type_text(line, "go 1;say hel")

    assert line.complete() == "go 1;say hello world"
    assert [arg.text for arg in line.model.scopes[1].arguments] == [
        "say",
        "hello",
        "world",
    ]
    assert line.model == parse(line.text, registry)
