"""Adapters - I/O implementations of ports."""

from .file_task_store import FileTaskStore

__all__ = [
    "FileTaskStore",
]
