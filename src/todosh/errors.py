"""Exception hierarchy for todosh.

Every error raised by the store or the command handlers derives from
``TodoError`` so the CLI can report it and exit non-zero in one place.
"""

from pathlib import Path
from typing import Optional, Union


class TodoError(Exception):
    """Base class for all todosh errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StorageError(TodoError):
    """Raised when the CSV database cannot be read, parsed or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None,
                 line: Optional[int] = None):
        self.path = Path(path) if path is not None else None
        self.line = line
        location = ""
        if self.path is not None:
            location = f"{self.path}"
            if line is not None:
                location += f":{line}"
            location += ": "
        super().__init__(f"{location}{message}")


class NotFoundError(TodoError):
    """Raised when no todo matches the requested id."""

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(f"Todo with ID {todo_id} not found")


class UsageError(TodoError):
    """Raised when a handler receives input it cannot act on."""
