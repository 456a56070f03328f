"""Storage layer for todosh using a flat CSV file."""

import csv
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import StorageError
from .todo import Todo


logger = logging.getLogger(__name__)

HEADER = ("ID", "TASK", "COMPLETED")
BOOLEAN_VALUES = {"true": True, "false": False}


class TodoCsvFormat:
    """Handles conversion between Todo objects and CSV rows."""

    @staticmethod
    def to_row(todo: Todo) -> List[str]:
        """Convert a Todo to a CSV row."""
        return [todo.id, todo.task, "true" if todo.completed else "false"]

    @staticmethod
    def from_row(row: Sequence[str]) -> Todo:
        """Decode a CSV row into a Todo.

        Rows must have exactly three cells. Cells are trimmed before they are
        checked, the id and task must be non-empty and the completion flag
        must be the literal ``true`` or ``false``.

        Raises:
            ValueError: If the row does not match the fixed schema
        """
        if len(row) != len(HEADER):
            raise ValueError(
                f"expected {len(HEADER)} columns, found {len(row)}"
            )

        todo_id, task, completed = (cell.strip() for cell in row)

        if not todo_id:
            raise ValueError("empty ID")
        if not task:
            raise ValueError("empty TASK")
        if completed not in BOOLEAN_VALUES:
            raise ValueError(f"invalid COMPLETED value {completed!r} (expected true or false)")

        return Todo(id=todo_id, task=task, completed=BOOLEAN_VALUES[completed])


class CsvStore:
    """File-based storage for todos in a single CSV file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[Todo]:
        """Load every todo from the CSV file in file order.

        A zero-byte file and a file holding only the header both load as an
        empty list.

        Raises:
            StorageError: If the file is missing, unreadable or malformed
        """
        try:
            with open(self.path, "r", encoding="utf-8-sig", newline="") as f:
                todos = self._parse(csv.reader(f, skipinitialspace=True))
        except FileNotFoundError:
            raise StorageError("database file does not exist (run 'todosh init')", self.path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise StorageError(f"failed to read database: {e}", self.path)

        logger.debug("Loaded %d todos from %s", len(todos), self.path)
        return todos

    def _parse(self, reader) -> List[Todo]:
        todos = []
        header_seen = False

        for row in reader:
            # Blank lines come through as empty rows
            if not row or all(not cell.strip() for cell in row):
                continue

            if not header_seen:
                header = tuple(cell.strip() for cell in row)
                if header != HEADER:
                    raise StorageError(
                        f"invalid header {', '.join(header)!r} (expected {', '.join(HEADER)!r})",
                        self.path,
                        reader.line_num,
                    )
                header_seen = True
                continue

            try:
                todos.append(TodoCsvFormat.from_row(row))
            except ValueError as e:
                raise StorageError(f"malformed row: {e}", self.path, reader.line_num)

        return todos

    def save(self, todos: List[Todo]) -> None:
        """Overwrite the CSV file with the given todos.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(HEADER)
                for todo in todos:
                    writer.writerow(TodoCsvFormat.to_row(todo))
        except OSError as e:
            raise StorageError(f"failed to write database: {e}", self.path)

        logger.debug("Saved %d todos to %s", len(todos), self.path)

    def initialize(self, force: bool = False) -> None:
        """Create an empty database holding only the header row.

        Raises:
            StorageError: If the file already exists and ``force`` is not set
        """
        if self.path.exists() and not force:
            raise StorageError("database file already exists (use --force to overwrite)", self.path)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"failed to create directory: {e}", self.path)

        self.save([])
        logger.info("Initialized empty database at %s", self.path)

    def next_id(self, todos: List[Todo]) -> str:
        """Get the next available todo ID.

        IDs are assigned as one more than the largest numeric ID present.
        Non-numeric IDs are left alone and do not take part.
        """
        numeric_ids = [int(todo.id) for todo in todos if todo.id.isdecimal()]
        if not numeric_ids:
            return "1"
        return str(max(numeric_ids) + 1)


def get_store(path: Optional[Union[str, Path]] = None) -> CsvStore:
    """Build a store for ``path`` or for the configured database path."""
    if path is None:
        from .config import get_config
        path = get_config().database_path
    return CsvStore(path)
