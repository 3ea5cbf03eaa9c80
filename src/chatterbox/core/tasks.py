"""Pure task domain logic - no I/O dependencies."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, TypeAlias

from .dates import DISPLAY_FORMAT
from .errors import NoInputError, TaskIndexError

# A date boundary is a parsed value when recognised, else the raw user text.
DateOrText: TypeAlias = datetime | str


def _require_description(description: str) -> None:
    if not description.strip():
        raise NoInputError("No input for task")


@dataclass(eq=False)
class Todo:
    """A task with no date attached."""

    symbol: ClassVar[str] = "T"

    description: str
    done: bool = False

    def __post_init__(self) -> None:
        _require_description(self.description)


@dataclass(eq=False)
class Deadline:
    """A task due by a date."""

    symbol: ClassVar[str] = "D"

    description: str
    due: DateOrText
    done: bool = False

    def __post_init__(self) -> None:
        _require_description(self.description)


@dataclass(eq=False)
class Event:
    """A task spanning a start and an end, each parsed or raw independently."""

    symbol: ClassVar[str] = "E"

    description: str
    start: DateOrText
    end: DateOrText
    done: bool = False

    def __post_init__(self) -> None:
        _require_description(self.description)


Task: TypeAlias = Todo | Deadline | Event


def format_date(value: DateOrText, display_format: str = DISPLAY_FORMAT) -> str:
    """Render a parsed date with the display format, or echo raw text."""
    if isinstance(value, datetime):
        return value.strftime(display_format)
    return value


def describe(task: Task, display_format: str = DISPLAY_FORMAT) -> str:
    """Description followed by the task's date annotation, if any."""
    match task:
        case Todo():
            return task.description
        case Deadline():
            return f"{task.description} ( by {format_date(task.due, display_format)} )"
        case Event():
            start = format_date(task.start, display_format)
            end = format_date(task.end, display_format)
            return f"{task.description} ( from {start} to {end} )"
    raise TypeError(f"Not a task: {task!r}")


def kind_name(task: Task) -> str:
    """Human-readable variant name ("Todo", "Deadline", "Event")."""
    return type(task).__name__


def status_marker(task: Task) -> str:
    return "X" if task.done else " "


@dataclass
class TaskList:
    """
    Ordered task collection.

    Insertion order is display order and persisted order. Indices here are
    0-based; TaskIndexError reports them 1-based, as the user typed them.
    """

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.tasks):
            raise TaskIndexError(index + 1, len(self.tasks))

    def add(self, task: Task) -> Task:
        self.tasks.append(task)
        return task

    def get(self, index: int) -> Task:
        self._check(index)
        return self.tasks[index]

    def set_done(self, index: int, done: bool) -> Task:
        """Set the done flag of the task at index and return it."""
        task = self.get(index)
        task.done = done
        return task

    def remove(self, index: int) -> Task:
        self._check(index)
        return self.tasks.pop(index)

    def position(self, task: Task) -> int | None:
        """0-based position of this exact task object, or None."""
        for i, candidate in enumerate(self.tasks):
            if candidate is task:
                return i
        return None

    def find(self, phrase: str) -> list[tuple[int, Task]]:
        """(0-based index, task) pairs whose description contains phrase."""
        needle = phrase.strip().lower()
        return [
            (i, t) for i, t in enumerate(self.tasks) if needle in t.description.lower()
        ]
