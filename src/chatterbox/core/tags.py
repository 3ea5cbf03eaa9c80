"""Tags - named labels shared across tasks, independent of task lifecycle."""

from dataclasses import dataclass, field

from .tasks import Task


@dataclass
class Tag:
    """
    A named label.

    Equality is by exact, case-sensitive name. The tag references tasks but
    does not own them.
    """

    name: str
    tasks: list[Task] = field(default_factory=list, compare=False, repr=False)

    def is_tagged(self, task: Task) -> bool:
        return any(t is task for t in self.tasks)

    def tag(self, task: Task) -> bool:
        """Associate task. Returns False if it was already associated."""
        if self.is_tagged(task):
            return False
        self.tasks.append(task)
        return True

    def untag(self, task: Task) -> bool:
        """Drop the association. Returns False if there was none."""
        for i, t in enumerate(self.tasks):
            if t is task:
                del self.tasks[i]
                return True
        return False


@dataclass
class TagList:
    """Tags keyed by name, one per distinct name, in creation order."""

    tags: dict[str, Tag] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self):
        return iter(self.tags.values())

    def __contains__(self, name: str) -> bool:
        return name in self.tags

    def get(self, name: str) -> Tag | None:
        return self.tags.get(name)

    def get_or_create(self, name: str) -> Tag:
        tag = self.tags.get(name)
        if tag is None:
            tag = Tag(name)
            self.tags[name] = tag
        return tag

    def tags_for(self, task: Task) -> list[Tag]:
        return [tag for tag in self.tags.values() if tag.is_tagged(task)]

    def untag_everywhere(self, task: Task) -> None:
        """Remove task from every tag. Tags themselves are kept."""
        for tag in self.tags.values():
            tag.untag(task)
