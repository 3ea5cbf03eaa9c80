"""Command grammar - classifies input lines and extracts their parameters.

Pure functions over the raw line. Extraction offsets are fixed keyword
lengths, so callers pass the stripped line that was classified.
"""

import re
from enum import Enum

from .errors import ArgumentOrderError, InvalidInputError, MissingParameterError

_DIGITS = re.compile(r"[0-9]+")


class CommandKind(Enum):
    """The classified intent of one input line."""

    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DELETE = "delete"
    FINDTAG = "findtag"
    FIND = "find"
    TAG = "tag"
    ALLTAGS = "alltags"
    REMOVETAG = "removetag"
    INVALID = "invalid"


# Prefix match order. "findtag" must precede "find".
KEYWORD_ORDER: tuple[CommandKind, ...] = (
    CommandKind.BYE,
    CommandKind.LIST,
    CommandKind.MARK,
    CommandKind.UNMARK,
    CommandKind.TODO,
    CommandKind.DEADLINE,
    CommandKind.EVENT,
    CommandKind.DELETE,
    CommandKind.FINDTAG,
    CommandKind.FIND,
    CommandKind.TAG,
    CommandKind.ALLTAGS,
    CommandKind.REMOVETAG,
)

MUTATING_KINDS = frozenset(
    {
        CommandKind.MARK,
        CommandKind.UNMARK,
        CommandKind.TODO,
        CommandKind.DEADLINE,
        CommandKind.EVENT,
        CommandKind.DELETE,
        CommandKind.TAG,
        CommandKind.REMOVETAG,
    }
)


def classify(line: str) -> CommandKind:
    """Case-insensitive keyword prefix match; first match wins."""
    text = line.strip().lower()
    for kind in KEYWORD_ORDER:
        if text.startswith(kind.value):
            return kind
    return CommandKind.INVALID


def extract_index(line: str) -> int:
    """
    Extract the task index for mark/unmark/delete.

    Scans backwards from the end of the line collecting a contiguous run of
    digits, so "mark3a-2" reads as the negative number -2.
    """
    pos = len(line)
    while pos > 0 and line[pos - 1].isdecimal():
        pos -= 1
    digits = line[pos:]
    is_negative = pos > 0 and line[pos - 1] == "-"

    if not digits:
        raise InvalidInputError("No number found")
    if is_negative:
        raise InvalidInputError("Negative number found")
    return int(digits)


def extract_todo_description(line: str) -> str:
    """Text after "todo". An empty result is rejected when the task is built."""
    return line[4:].strip()


def extract_deadline(line: str) -> tuple[str, str]:
    """Split "deadline <desc> /by <date>" into (description, date text)."""
    marker = line.find("/by")
    if marker < 0:
        raise MissingParameterError("Deadline date")

    description = line[8:marker]
    due = line[marker + len("/by"):]
    return description.strip(), due.strip()


def extract_event(line: str) -> tuple[str, str, str]:
    """Split "event <desc> /from <start> /to <end>" into its three parts."""
    from_marker = line.find("/from")
    if from_marker < 0:
        raise MissingParameterError("Event Start Date")
    to_marker = line.find("/to")
    if to_marker < 0:
        raise MissingParameterError("Event End Date")
    if to_marker < from_marker:
        raise ArgumentOrderError()

    description = line[5:from_marker]
    start = line[from_marker + len("/from"):to_marker]
    end = line[to_marker + len("/to"):]
    return description.strip(), start.strip(), end.strip()


def extract_find_tag_name(line: str) -> str:
    """Tag name after "findtag"."""
    return line[7:].strip()


def extract_find_keywords(line: str) -> str:
    """Keyword text after "find", left unstripped."""
    return line[4:]


def _tag_markers(line: str) -> tuple[int, int]:
    index_marker = line.find("/i")
    if index_marker < 0:
        raise MissingParameterError("Tag index")
    tag_marker = line.find("/t")
    if tag_marker < 0:
        raise MissingParameterError("Tag name")
    return index_marker, tag_marker


def _tag_parts(line: str, index_marker: int, tag_marker: int) -> tuple[int, str]:
    raw_index = line[index_marker + 2:tag_marker].strip()
    if not _DIGITS.fullmatch(raw_index):
        raise MissingParameterError("Tag index")

    tag_name = line[tag_marker + 2:].strip()
    if not tag_name:
        raise MissingParameterError("Tag name")
    return int(raw_index), tag_name


def extract_tag_association(line: str) -> tuple[int, str]:
    """Parse "tag /i <index> /t <name>" into (1-based index, tag name)."""
    index_marker, tag_marker = _tag_markers(line)
    return _tag_parts(line, index_marker, tag_marker)


def extract_remove_tag_association(line: str) -> tuple[int, str]:
    """Parse "removetag /i <index> /t <name>"; /i must come before /t."""
    index_marker, tag_marker = _tag_markers(line)
    if index_marker > tag_marker:
        raise ArgumentOrderError()
    return _tag_parts(line, index_marker, tag_marker)
