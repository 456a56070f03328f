"""Todo data model for todosh."""

from dataclasses import dataclass


@dataclass
class Todo:
    """A single todo record as stored in one CSV row."""

    id: str
    task: str
    completed: bool = False

    def __post_init__(self):
        """Trim text fields the same way the CSV reader does."""
        self.id = str(self.id).strip()
        self.task = str(self.task).strip()

    def complete(self):
        """Mark the task as completed."""
        self.completed = True

    def rename(self, task: str):
        """Replace the task text."""
        self.task = task.strip()

    @property
    def status(self) -> str:
        return "completed" if self.completed else "pending"
