# cmdscope — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Canonicalization and tokenization of multi-command input lines.

A line holds zero or more sub-commands separated by `DELIMITER`; each
sub-command is a command name followed by space-separated arguments:

    "teleport alice;give alice weapon 5"

Canonical form (see `clean`) has single spaces between words, no spaces
around a delimiter and no leading or trailing spaces. Consecutive delimiters
are kept, each one producing an empty sub-command.

Functions:
- clean: Canonicalize a raw line.
- needs_cleaning: Cheap check for whitespace that `clean` would collapse.
- is_single_token: Check that a replacement word keeps the token structure.
- split_commands: Split a canonical line into sub-command strings.
- split_words: Split a sub-command into words.
- tokenize: Clean a raw line and split it into words per sub-command.
"""
from __future__ import annotations

DELIMITER = ";"
SEPARATOR = " "


def clean(text: str, strip: bool = True) -> str:
    """
    Canonicalize a raw input line.

    - Runs of spaces collapse into one.
    - Spaces directly before or after a delimiter are dropped.
    - Leading and trailing spaces are trimmed (unless `strip` is False, which
      input widgets use so a single trailing space survives while typing).

    The transformation is idempotent.

    Args:
        text (str): The raw line.
        strip (bool): Whether to trim the ends of the line.

    Returns:
        str: The canonical line.
    """
    chars: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == SEPARATOR:
            if not chars or chars[-1] != SEPARATOR:
                chars.append(char)
        elif char == DELIMITER:
            while chars and chars[-1] == SEPARATOR:
                chars.pop()
            chars.append(char)
            while index + 1 < length and text[index + 1] == SEPARATOR:
                index += 1
        else:
            chars.append(char)
        index += 1

    cleaned = "".join(chars)
    if strip:
        return cleaned.strip(SEPARATOR)
    return cleaned


def needs_cleaning(text: str) -> bool:
    """
    Return True if `text` holds a double space or a space next to a delimiter.

    Leading and trailing spaces are ignored so a line can be edited word by word.
    """
    for index, char in enumerate(text):
        following = text[index + 1] if index + 1 < len(text) else ""
        if char == SEPARATOR and following in (SEPARATOR, DELIMITER):
            return True
        if char == DELIMITER and following == SEPARATOR:
            return True
    return False


def is_single_token(text: str) -> bool:
    """Return True if `text` is one non-empty word with no separator or delimiter."""
    return bool(text) and SEPARATOR not in text and DELIMITER not in text


def split_commands(text: str) -> list[str]:
    """Split a line on the delimiter. An empty line has no sub-commands."""
    if not text:
        return []
    return text.split(DELIMITER)


def split_words(sub_command: str) -> list[str]:
    """Split a sub-command on single spaces. An empty sub-command yields `[""]`."""
    return sub_command.split(SEPARATOR)


def tokenize(text: str) -> list[list[str]]:
    """Clean `text` and return the ordered words of each sub-command."""
    return [split_words(sub_command) for sub_command in split_commands(clean(text))]
