"""Command errors. All of them are recoverable at the command loop."""


class ChatterboxError(Exception):
    """Base class for errors reported back to the user."""

    pass


class NoInputError(ChatterboxError):
    """Raised when a task is created without a description."""

    pass


class UnknownCommandError(ChatterboxError):
    """Raised when a line does not start with a known keyword."""

    def __init__(self, message: str = "Unknown command"):
        super().__init__(message)


class MissingParameterError(ChatterboxError):
    """Raised when a required marker or field is absent or malformed."""

    def __init__(self, parameter: str):
        super().__init__(f"Missing parameter: {parameter}")
        self.parameter = parameter


class ArgumentOrderError(MissingParameterError):
    """Raised when markers appear in the wrong order (e.g. /to before /from)."""

    def __init__(self, parameter: str = "Wrong argument order"):
        super().__init__(parameter)


class InvalidInputError(ChatterboxError):
    """Raised for a non-numeric or negative task index, or multi-line input."""

    pass


class TaskIndexError(InvalidInputError):
    """Raised when a 1-based task index does not name an existing task."""

    def __init__(self, index: int, size: int):
        super().__init__(f"No task at index {index} (list has {size} tasks)")
        self.index = index
        self.size = size
