"""Functional core - pure business logic with no I/O."""

from .dates import DateFormats, DateTimeParser, DEFAULT_FORMATS, DISPLAY_FORMAT
from .errors import (
    ArgumentOrderError,
    ChatterboxError,
    InvalidInputError,
    MissingParameterError,
    NoInputError,
    TaskIndexError,
    UnknownCommandError,
)
from .executor import CommandExecutor, CommandResult
from .grammar import CommandKind, classify
from .tags import Tag, TagList
from .tasks import Deadline, Event, Task, TaskList, Todo, describe

__all__ = [
    # Dates
    "DateFormats",
    "DateTimeParser",
    "DEFAULT_FORMATS",
    "DISPLAY_FORMAT",
    # Errors
    "ArgumentOrderError",
    "ChatterboxError",
    "InvalidInputError",
    "MissingParameterError",
    "NoInputError",
    "TaskIndexError",
    "UnknownCommandError",
    # Commands
    "CommandExecutor",
    "CommandResult",
    "CommandKind",
    "classify",
    # Model
    "Tag",
    "TagList",
    "Deadline",
    "Event",
    "Task",
    "TaskList",
    "Todo",
    "describe",
]
