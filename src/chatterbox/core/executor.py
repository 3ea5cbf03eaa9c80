"""Command execution - applies one classified line to the task model.

Pure: no printing, no storage. The caller decides what to do with the
response and whether to persist (CommandResult.mutated).
"""

import logging
from dataclasses import dataclass

from . import responses
from .dates import DateTimeParser
from .errors import InvalidInputError, MissingParameterError, UnknownCommandError
from .grammar import (
    MUTATING_KINDS,
    CommandKind,
    classify,
    extract_deadline,
    extract_event,
    extract_find_keywords,
    extract_find_tag_name,
    extract_index,
    extract_remove_tag_association,
    extract_tag_association,
    extract_todo_description,
)
from .tags import TagList
from .tasks import Deadline, Event, TaskList, Todo

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one command. A None response means the loop should end."""

    kind: CommandKind
    response: str | None
    mutated: bool = False


class CommandExecutor:
    """One entry point per CommandKind, operating on a TaskList and TagList."""

    def __init__(
        self,
        tasks: TaskList,
        tags: TagList,
        parser: DateTimeParser | None = None,
    ):
        self.tasks = tasks
        self.tags = tags
        self.parser = parser or DateTimeParser()

    @property
    def display_format(self) -> str:
        return self.parser.display_format

    def execute(self, line: str) -> CommandResult:
        """
        Classify and run one input line.

        Raises ChatterboxError subclasses for bad input; the model is left
        untouched when that happens.
        """
        line = line.strip()
        if len(line.splitlines()) > 1:
            raise InvalidInputError("One command per line")
        kind = classify(line)
        logger.debug(f"Executing {kind.name}: {line!r}")
        response = self._dispatch(kind, line)
        return CommandResult(kind=kind, response=response, mutated=kind in MUTATING_KINDS)

    def _dispatch(self, kind: CommandKind, line: str) -> str | None:
        match kind:
            case CommandKind.BYE:
                return None
            case CommandKind.LIST:
                return responses.task_listing(self.tasks, self.display_format)
            case CommandKind.MARK:
                return self.mark(line, done=True)
            case CommandKind.UNMARK:
                return self.mark(line, done=False)
            case CommandKind.TODO:
                return self.add_todo(line)
            case CommandKind.DEADLINE:
                return self.add_deadline(line)
            case CommandKind.EVENT:
                return self.add_event(line)
            case CommandKind.DELETE:
                return self.delete(line)
            case CommandKind.FINDTAG:
                return self.find_tag(line)
            case CommandKind.FIND:
                return self.find(line)
            case CommandKind.TAG:
                return self.tag(line)
            case CommandKind.ALLTAGS:
                return responses.all_tags(self.tags)
            case CommandKind.REMOVETAG:
                return self.remove_tag(line)
            case CommandKind.INVALID:
                raise UnknownCommandError()
        raise UnknownCommandError()

    # ============== Task commands ==============

    def mark(self, line: str, done: bool) -> str:
        index = extract_index(line) - 1
        task = self.tasks.set_done(index, done)
        if done:
            return responses.marked(task, self.display_format)
        return responses.unmarked(task, self.display_format)

    def add_todo(self, line: str) -> str:
        task = self.tasks.add(Todo(extract_todo_description(line)))
        return responses.added(task, len(self.tasks))

    def add_deadline(self, line: str) -> str:
        description, due_text = extract_deadline(line)
        due = self.parser.parse_or_raw(due_text)
        if isinstance(due, str):
            logger.debug(f"Keeping raw deadline text: {due!r}")
        task = self.tasks.add(Deadline(description, due))
        return responses.added(task, len(self.tasks))

    def add_event(self, line: str) -> str:
        description, start_text, end_text = extract_event(line)
        start = self.parser.parse_or_raw(start_text)
        end = self.parser.parse_or_raw(end_text)
        task = self.tasks.add(Event(description, start, end))
        return responses.added(task, len(self.tasks))

    def delete(self, line: str) -> str:
        index = extract_index(line) - 1
        task = self.tasks.remove(index)
        self.tags.untag_everywhere(task)
        return responses.deleted(task, len(self.tasks), self.display_format)

    def find(self, line: str) -> str:
        phrase = extract_find_keywords(line).strip()
        if not phrase:
            raise MissingParameterError("Find keywords")
        matches = self.tasks.find(phrase)
        return responses.find_results(phrase, matches, self.display_format)

    # ============== Tag commands ==============

    def tag(self, line: str) -> str:
        number, name = extract_tag_association(line)
        task = self.tasks.get(number - 1)
        tag = self.tags.get_or_create(name)
        if not tag.tag(task):
            return responses.already_tagged(task, tag, self.display_format)
        return responses.tagged(task, tag, self.display_format)

    def find_tag(self, line: str) -> str:
        name = extract_find_tag_name(line)
        if not name:
            raise MissingParameterError("Tag name")
        tag = self.tags.get(name)
        if tag is None:
            return responses.tag_not_found(name)
        return responses.tag_listing(tag, self.display_format)

    def remove_tag(self, line: str) -> str:
        number, name = extract_remove_tag_association(line)
        task = self.tasks.get(number - 1)
        tag = self.tags.get(name)
        if tag is None:
            return responses.tag_not_found(name)
        if not tag.untag(task):
            return responses.not_tagged(task, name, self.display_format)
        return responses.untagged(task, tag, self.display_format)
