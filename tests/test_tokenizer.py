import pytest

from cmdscope.tokenizer import (
    clean,
    needs_cleaning,
    split_commands,
    split_words,
    tokenize,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("go 1", "go 1"),
        ("  go   1 ", "go 1"),
        ("go 1 ; tp 2", "go 1;tp 2"),
        ("foo bar; baz", "foo bar;baz"),
        ("go;   tp", "go;tp"),
        ("go ;", "go;"),
        ("a;;b", "a;;b"),
        ("a; ;b", "a;;b"),
        (";go", ";go"),
        ("", ""),
        ("     ", ""),
    ],
)
def test_clean(raw, expected):
    assert clean(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "  give   alice  weapon  5 ;  tp bob ",
        "a; ;b",
        " ; ; ",
        "say hi  hi;say hi",
        ";;;",
        "x",
    ],
)
def test_clean_is_idempotent(raw):
    once = clean(raw)
    assert clean(once) == once
    assert clean(raw, strip=False) == clean(clean(raw, strip=False), strip=False)


def test_clean_without_strip_keeps_single_edge_spaces():
    assert clean("give  ", strip=False) == "give "
    assert clean("  go", strip=False) == " go"
    assert clean("give  alice ;  ", strip=False) == "give alice;"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("go  1", True),
        ("go; 1", True),
        ("go ;1", True),
        ("go 1", False),
        ("give ", False),
        ("a;;b", False),
        ("", False),
    ],
)
def test_needs_cleaning(text, expected):
    assert needs_cleaning(text) is expected


def test_split_commands():
    assert split_commands("") == []
    assert split_commands("go 1") == ["go 1"]
    assert split_commands("a;;b") == ["a", "", "b"]
    assert split_commands("go;") == ["go", ""]


def test_split_words():
    assert split_words("give alice 5") == ["give", "alice", "5"]
    assert split_words("") == [""]


def test_tokenize():
    assert tokenize("go  1; tp 2 3") == [["go", "1"], ["tp", "2", "3"]]
    assert tokenize("a;") == [["a"], [""]]
    assert tokenize("a; ;b") == [["a"], [""], ["b"]]
    assert tokenize("   ") == []
