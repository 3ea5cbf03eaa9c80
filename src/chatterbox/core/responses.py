"""Response text for each command - pure formatting, no I/O."""

from collections.abc import Iterable

from .dates import DISPLAY_FORMAT
from .tags import Tag
from .tasks import Task, describe, kind_name, status_marker

BOT_NAME = "Chatterbox"


def greeting(bot_name: str = BOT_NAME) -> str:
    return f"Hello! I'm {bot_name}\nWhat can I do for you?"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def format_task_line(number: int, task: Task, display_format: str = DISPLAY_FORMAT) -> str:
    """Single listing line, e.g. "2. [D][X] return book ( by Dec 02 2019, 18:00 )"."""
    return f"{number}. [{task.symbol}][{status_marker(task)}] {describe(task, display_format)}"


def _numbered(pairs: Iterable[tuple[int, Task]], display_format: str) -> list[str]:
    return [format_task_line(i + 1, t, display_format) for i, t in pairs]


def task_listing(tasks: Iterable[Task], display_format: str = DISPLAY_FORMAT) -> str:
    lines = _numbered(enumerate(tasks), display_format)
    if not lines:
        return "No tasks in list yet."
    return "\n".join(["Current Tasks in List:", *lines])


def marked(task: Task, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Marked Task as done\n{describe(task, display_format)}"


def unmarked(task: Task, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Marked Task as undone\n{describe(task, display_format)}"


def added(task: Task, size: int) -> str:
    return f"Added {kind_name(task)} to Tasks\nCurrently {size} Tasks in List"


def deleted(task: Task, size: int, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Removing Task:\n{describe(task, display_format)}\nList has {size} tasks"


def tagged(task: Task, tag: Tag, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Tagged with #{tag.name}:\n{describe(task, display_format)}"


def already_tagged(task: Task, tag: Tag, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Already tagged with #{tag.name}:\n{describe(task, display_format)}"


def untagged(task: Task, tag: Tag, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Removed #{tag.name} from:\n{describe(task, display_format)}"


def tag_not_found(name: str) -> str:
    return f"Tag not found: #{name}"


def not_tagged(task: Task, name: str, display_format: str = DISPLAY_FORMAT) -> str:
    return f"Task is not tagged with #{name}:\n{describe(task, display_format)}"


def tag_listing(tag: Tag, display_format: str = DISPLAY_FORMAT) -> str:
    if not tag.tasks:
        return f"No tasks tagged with #{tag.name}."
    lines = [describe(t, display_format) for t in tag.tasks]
    return "\n".join([f"Tasks tagged with #{tag.name}:", *lines])


def all_tags(tags: Iterable[Tag]) -> str:
    lines = [f"#{tag.name} ({len(tag.tasks)})" for tag in tags]
    if not lines:
        return "No tags yet."
    return "\n".join(["All tags:", *lines])


def find_results(
    phrase: str,
    matches: list[tuple[int, Task]],
    display_format: str = DISPLAY_FORMAT,
) -> str:
    if not matches:
        return f"No matching tasks found for: {phrase}"
    return "\n".join(["Matching tasks in your list:", *_numbered(matches, display_format)])
