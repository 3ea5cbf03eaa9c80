"""Flat-file task storage adapter."""

import logging
import re
from pathlib import Path

from chatterbox.core.dates import DateTimeParser
from chatterbox.core.errors import NoInputError
from chatterbox.core.tags import TagList
from chatterbox.core.tasks import Deadline, Event, Task, Todo, format_date

logger = logging.getLogger(__name__)

SEPARATOR = " | "
TAG_SYMBOL = "#"
DONE_FLAG = "X"

_ESCAPED = re.compile(r"\\(.)")


def _escape(field: str) -> str:
    return field.replace("\\", "\\\\").replace("|", "\\|")


def _unescape(field: str) -> str:
    return _ESCAPED.sub(r"\1", field)


class FileTaskStore:
    """
    Flat-file task storage.

    Implements TaskStore protocol. One record per line, fields joined by
    " | ":

        T | X | read book
        D |   | return book | Dec 02 2019, 18:00
        E |   | meeting | Feb 02 2024, 14:00 | after lunch
        # | school | 1 2

    Dates are written with the parser's display format and re-parsed on
    load. Anything the parser cannot read back stays raw text, with "\\" and
    "|" backslash-escaped so it cannot be mistaken for a separator. Every
    save overwrites the whole file.
    """

    def __init__(self, path: Path | str, parser: DateTimeParser | None = None):
        self.path = Path(path).expanduser()
        self.parser = parser or DateTimeParser()

    def exists(self) -> bool:
        return self.path.exists()

    # ============== Save ==============

    def _format_task(self, task: Task) -> str:
        done = DONE_FLAG if task.done else " "
        fields = [task.symbol, done, task.description]
        display_format = self.parser.display_format
        match task:
            case Deadline():
                fields.append(_escape(format_date(task.due, display_format)))
            case Event():
                fields.append(_escape(format_date(task.start, display_format)))
                fields.append(_escape(format_date(task.end, display_format)))
        return SEPARATOR.join(fields)

    def _format_tags(self, tasks: list[Task], tags: TagList) -> list[str]:
        lines = []
        for tag in tags:
            positions = []
            for tagged in tag.tasks:
                for i, task in enumerate(tasks):
                    if task is tagged:
                        positions.append(str(i + 1))
                        break
            lines.append(SEPARATOR.join([TAG_SYMBOL, tag.name, " ".join(positions)]))
        return lines

    def save(self, tasks: list[Task], tags: TagList | None = None) -> None:
        """Overwrite the file with tasks, then tag records."""
        tasks = list(tasks)
        lines = [self._format_task(t) for t in tasks]
        if tags is not None:
            lines.extend(self._format_tags(tasks, tags))

        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = "".join(f"{line}\n" for line in lines)
        self.path.write_text(content, encoding="utf-8")
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")

    # ============== Load ==============

    def _parse_task(self, line: str) -> Task:
        symbol, done_flag, rest = line.split(SEPARATOR, 2)
        done = done_flag == DONE_FLAG

        match symbol:
            case Todo.symbol:
                return Todo(rest, done=done)
            case Deadline.symbol:
                description, due = rest.rsplit(SEPARATOR, 1)
                return Deadline(
                    description, self.parser.parse_or_raw(_unescape(due)), done=done
                )
            case Event.symbol:
                description, start, end = rest.rsplit(SEPARATOR, 2)
                return Event(
                    description,
                    self.parser.parse_or_raw(_unescape(start)),
                    self.parser.parse_or_raw(_unescape(end)),
                    done=done,
                )
        raise ValueError(f"Unknown task symbol: {symbol!r}")

    def _apply_tag(self, line: str, tasks: list[Task], tags: TagList) -> None:
        _, rest = line.split(SEPARATOR, 1)
        name, positions = rest.rsplit(SEPARATOR, 1)
        tag = tags.get_or_create(name)
        for raw in positions.split():
            if not raw.isdecimal() or not 1 <= int(raw) <= len(tasks):
                logger.warning(f"Skipping bad task position {raw!r} for tag {name!r}")
                continue
            tag.tag(tasks[int(raw) - 1])

    def load(self) -> tuple[list[Task], TagList]:
        """
        Read tasks and tags back.

        Raises FileNotFoundError when nothing has been saved yet. Malformed
        lines are logged and skipped.
        """
        text = self.path.read_text(encoding="utf-8")
        tasks: list[Task] = []
        tag_lines: list[str] = []

        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            if line.startswith(TAG_SYMBOL + SEPARATOR):
                tag_lines.append(line)
                continue
            try:
                tasks.append(self._parse_task(line))
            except (ValueError, NoInputError) as e:
                logger.warning(f"Skipping malformed line {lineno} in {self.path}: {e}")

        tags = TagList()
        for line in tag_lines:
            try:
                self._apply_tag(line, tasks, tags)
            except ValueError as e:
                logger.warning(f"Skipping malformed tag record in {self.path}: {e}")

        logger.debug(f"Loaded {len(tasks)} tasks and {len(tags)} tags from {self.path}")
        return tasks, tags
