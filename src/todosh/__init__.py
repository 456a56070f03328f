"""todosh - A terminal based todo list backed by a CSV file."""

__version__ = "1.0.0"
__author__ = "todosh Team"

from .todo import Todo
from .errors import TodoError, StorageError, NotFoundError, UsageError

__all__ = [
    "Todo",
    "TodoError",
    "StorageError",
    "NotFoundError",
    "UsageError",
    "__version__",
]
