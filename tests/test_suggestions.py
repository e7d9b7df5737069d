import pytest

from cmdscope.registry import CommandRegistry
from cmdscope.suggestions import (
    appropriate_suggestion,
    auto_fill_command,
    current_word_index,
    filter_suggestions,
    rebuild_with_suggestion,
)


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.add_command("go")
    registry.add_command("teleport", aliases=["tp"], arguments=[["alice", "bob"]])
    registry.add_command("give", arguments=[["weapon", "armor"], ["1", "5"]])
    return registry


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", 1),
        ("give", 1),
        ("give ", 2),
        ("give alice w", 3),
        ("go 1;tp", 1),
        ("go 1;tp ", 2),
        ("go 1;", 1),
    ],
)
def test_current_word_index(text, expected):
    assert current_word_index(text) == expected


@pytest.mark.parametrize(
    "stub,expected",
    [("tele", "teleport"), ("tp", "tp"), ("LEP", "teleport"), ("g", "go"), ("zzz", "")],
)
def test_auto_fill_command(registry, stub, expected):
    assert auto_fill_command(registry, stub) == expected


def test_filter_suggestions():
    items = ["Alice", "bob", "alfred", "Sal"]
    assert filter_suggestions(items, "al") == ["Alice", "alfred", "Sal"]
    assert filter_suggestions(items, "al", limit=2) == ["Alice", "alfred"]
    assert filter_suggestions(items, "") == items
    assert filter_suggestions([str(n) for n in range(30)], "") == [
        str(n) for n in range(10)
    ]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("tele", "teleport"),
        ("give we", "weapon"),
        ("give ", "weapon"),
        ("give weapon ", "1"),
        ("go 1;tp b", "bob"),
        ("foo x", ""),
        ("give weapon 5 extra", ""),
        ("give zzz", ""),
    ],
)
def test_appropriate_suggestion(registry, text, expected):
    assert appropriate_suggestion(registry, text) == expected


@pytest.mark.parametrize(
    "text,suggestion,expected",
    [
        ("go 1;give we", "weapon", "go 1;give weapon"),
        ("give ", "weapon", "give weapon"),
        ("", "go", "go"),
        ("te", "teleport", "teleport"),
    ],
)
def test_rebuild_with_suggestion(text, suggestion, expected):
    assert rebuild_with_suggestion(text, suggestion) == expected
