"""Shared session layer between the console and Telegram front-ends.

A Session owns the task list and tag list, runs one command at a time, and
saves after every command that changes state.
"""

import logging
import threading

from .adapters.file_task_store import FileTaskStore
from .config import Config
from .core import responses
from .core.dates import DEFAULT_FORMATS, DateTimeParser
from .core.errors import ChatterboxError
from .core.executor import CommandExecutor
from .core.tags import TagList
from .core.tasks import TaskList
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Sorry there was an error: "


class Session:
    """
    Host for one user's task list.

    Command execution is serialised with a lock so front-ends that dispatch
    from another thread never mutate the lists concurrently.
    """

    def __init__(
        self,
        store: TaskStore,
        parser: DateTimeParser | None = None,
        bot_name: str = responses.BOT_NAME,
    ):
        self.store = store
        self.parser = parser or DateTimeParser()
        self.bot_name = bot_name
        self.tasks = TaskList()
        self.tags = TagList()
        self._lock = threading.Lock()
        self._load()
        self.executor = CommandExecutor(self.tasks, self.tags, self.parser)

    def _load(self) -> None:
        """Populate state from the store; any failure leaves it empty."""
        try:
            loaded_tasks, loaded_tags = self.store.load()
        except FileNotFoundError:
            logger.info("No history file found, starting with an empty list")
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load task history: {e}")
            return
        self.tasks.tasks.extend(loaded_tasks)
        self.tags.tags.update(loaded_tags.tags)
        logger.info(f"Loaded {len(self.tasks)} tasks from history")

    def has_tasks(self) -> bool:
        return len(self.tasks) > 0

    def greeting(self) -> str:
        return responses.greeting(self.bot_name)

    def goodbye(self) -> str:
        return responses.goodbye()

    def save(self) -> str | None:
        """Persist current state. Returns a warning message on failure."""
        try:
            self.store.save(self.tasks.tasks, self.tags)
        except OSError as e:
            logger.error(f"Failed to save tasks: {e}")
            return f"Warning: tasks could not be saved ({e})"
        return None

    def process_input(self, line: str) -> str | None:
        """
        Run one command line and return the response.

        None means the user said bye. Command errors become a message and
        the session carries on.
        """
        with self._lock:
            try:
                result = self.executor.execute(line)
            except ChatterboxError as e:
                logger.info(f"Command failed: {e}")
                return f"{ERROR_PREFIX}{e}"

            if not result.mutated:
                return result.response

            warning = self.save()
            if warning:
                return f"{result.response}\n{warning}"
            return result.response


def create_session(config: Config) -> Session:
    """Build a file-backed session from config."""
    parser = DateTimeParser(DEFAULT_FORMATS.with_display_format(config.date_display_format))
    store = FileTaskStore(config.data_path, parser)
    return Session(store, parser, bot_name=config.bot_name)
