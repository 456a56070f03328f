"""Command handlers for todosh.

Each handler works on a collection already loaded from a ``CsvStore``.
Mutating handlers change the collection in memory and call ``store.save``
as their last step, so a failed lookup never touches the file.
"""

from typing import List

from .errors import NotFoundError, UsageError
from .storage import CsvStore
from .todo import Todo


def find_todo(todos: List[Todo], todo_id: str) -> Todo:
    """Return the first todo whose id matches ``todo_id``.

    Raises:
        NotFoundError: If no todo has that id
    """
    todo_id = str(todo_id).strip()
    for todo in todos:
        if todo.id == todo_id:
            return todo
    raise NotFoundError(todo_id)


def clean_task(task: str) -> str:
    """Trim task text.

    Raises:
        UsageError: If nothing is left after trimming
    """
    task = (task or "").strip()
    if not task:
        raise UsageError("Task text cannot be empty")
    return task


def list_todos(todos: List[Todo], show_completed: bool = True) -> List[Todo]:
    """Select the todos to display, in file order."""
    if show_completed:
        return list(todos)
    return [todo for todo in todos if not todo.completed]


def create_todo(store: CsvStore, todos: List[Todo], task: str) -> Todo:
    """Append a new pending todo and persist the collection."""
    task = clean_task(task)
    todo = Todo(id=store.next_id(todos), task=task)
    todos.append(todo)
    store.save(todos)
    return todo


def complete_todo(store: CsvStore, todos: List[Todo], todo_id: str) -> Todo:
    """Mark a todo as completed and persist the collection."""
    todo = find_todo(todos, todo_id)
    todo.complete()
    store.save(todos)
    return todo


def update_todo(store: CsvStore, todos: List[Todo], todo_id: str, task: str) -> Todo:
    """Replace the text of a todo and persist the collection."""
    task = clean_task(task)
    todo = find_todo(todos, todo_id)
    todo.rename(task)
    store.save(todos)
    return todo


def delete_todo(store: CsvStore, todos: List[Todo], todo_id: str) -> Todo:
    """Remove a todo and persist the remaining collection."""
    todo = find_todo(todos, todo_id)
    todos.remove(todo)
    store.save(todos)
    return todo
