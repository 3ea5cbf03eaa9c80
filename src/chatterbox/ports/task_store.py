"""Task storage interface."""

from typing import Protocol

from chatterbox.core.tags import TagList
from chatterbox.core.tasks import Task


class TaskStore(Protocol):
    """Interface for persisting the task list between sessions."""

    def load(self) -> tuple[list[Task], TagList]:
        """Load tasks and tags. Raises FileNotFoundError if nothing was saved."""
        ...

    def save(self, tasks: list[Task], tags: TagList | None = None) -> None:
        """Overwrite saved state with tasks (and their tag associations)."""
        ...
