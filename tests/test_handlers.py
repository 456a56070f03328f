"""Tests for the command handlers."""

import pytest

from todosh.errors import NotFoundError, UsageError
from todosh.handlers import (
    complete_todo,
    create_todo,
    delete_todo,
    find_todo,
    list_todos,
    update_todo,
)
from todosh.storage import CsvStore
from todosh.todo import Todo


class TestListTodos:
    """Tests for the list handler."""

    def test_list_returns_all_in_order(self, store):
        todos = store.load()

        assert [t.id for t in list_todos(todos)] == ["1", "2", "3"]

    def test_list_hides_completed(self, store):
        todos = store.load()

        assert [t.id for t in list_todos(todos, show_completed=False)] == ["1", "2"]

    def test_list_does_not_touch_file(self, store):
        """Listing never changes the backing file."""
        before = store.path.read_bytes()

        list_todos(store.load())
        list_todos(store.load(), show_completed=False)

        assert store.path.read_bytes() == before


class TestCreateTodo:
    """Tests for the create handler."""

    def test_create_on_empty_store(self, empty_db):
        store = CsvStore(empty_db)
        todos = store.load()

        todo = create_todo(store, todos, "Buy milk")

        assert todo == Todo(id="1", task="Buy milk", completed=False)
        assert store.load() == [Todo(id="1", task="Buy milk", completed=False)]

    def test_create_appends_with_next_id(self, store):
        todos = store.load()

        todo = create_todo(store, todos, "  Walk dog  ")

        assert todo.id == "4"
        assert todo.task == "Walk dog"
        reloaded = store.load()
        assert [t.id for t in reloaded] == ["1", "2", "3", "4"]
        assert reloaded[-1] == todo

    def test_create_rejects_empty_text(self, store):
        before = store.path.read_bytes()

        with pytest.raises(UsageError):
            create_todo(store, store.load(), "   ")

        assert store.path.read_bytes() == before


class TestCompleteTodo:
    """Tests for the complete handler."""

    def test_complete_flips_only_target(self, store):
        original = store.load()

        todo = complete_todo(store, store.load(), "2")

        assert todo.completed is True
        reloaded = store.load()
        assert [t.id for t in reloaded] == [t.id for t in original]
        assert reloaded[0] == original[0]
        assert reloaded[1] == Todo(id="2", task="Cook dinner", completed=True)
        assert reloaded[2] == original[2]

    def test_complete_missing_id(self, store):
        """A missing id fails and leaves the file unmodified."""
        before = store.path.read_bytes()

        with pytest.raises(NotFoundError) as exc_info:
            complete_todo(store, store.load(), "42")

        assert exc_info.value.todo_id == "42"
        assert store.path.read_bytes() == before

    def test_complete_matches_first_duplicate(self, tmp_path):
        store = CsvStore(tmp_path / "db.csv")
        store.save([Todo(id="1", task="First"), Todo(id="1", task="Second")])

        complete_todo(store, store.load(), "1")

        assert [t.completed for t in store.load()] == [True, False]


class TestUpdateTodo:
    """Tests for the update handler."""

    def test_update_replaces_text(self, store):
        update_todo(store, store.load(), "1", "Take out recycling")

        reloaded = store.load()
        assert reloaded[0] == Todo(id="1", task="Take out recycling", completed=False)
        assert [t.task for t in reloaded[1:]] == ["Cook dinner", "Learn rust"]

    def test_update_missing_id(self, store):
        before = store.path.read_bytes()

        with pytest.raises(NotFoundError):
            update_todo(store, store.load(), "9", "Nope")

        assert store.path.read_bytes() == before

    def test_update_rejects_empty_text(self, store):
        with pytest.raises(UsageError):
            update_todo(store, store.load(), "1", "")


class TestDeleteTodo:
    """Tests for the delete handler."""

    def test_delete_removes_and_keeps_order(self, store):
        removed = delete_todo(store, store.load(), "2")

        assert removed.task == "Cook dinner"
        assert [t.id for t in store.load()] == ["1", "3"]

    def test_delete_does_not_reuse_ids_below_max(self, store):
        todos = store.load()
        delete_todo(store, todos, "2")

        todo = create_todo(store, store.load(), "New")

        assert todo.id == "4"

    def test_delete_missing_id(self, store):
        before = store.path.read_bytes()

        with pytest.raises(NotFoundError):
            delete_todo(store, store.load(), "nope")

        assert store.path.read_bytes() == before


class TestFindTodo:
    """Tests for id lookup."""

    def test_find_trims_id(self, store):
        assert find_todo(store.load(), " 3 ").task == "Learn rust"

    def test_find_missing(self):
        with pytest.raises(NotFoundError, match="Todo with ID 5 not found"):
            find_todo([], "5")
