"""Unit tests for the task and task list models."""

import pytest
from pydantic import ValidationError

from todocli.errors import TaskNotFoundError
from todocli.models import (
    NO_TASKS_MESSAGE,
    STATUS_COMPLETED,
    STATUS_UNCOMPLETED,
    Task,
    TodoList,
)


def _snapshot(todo_list: TodoList) -> list[dict]:
    return [task.model_dump() for task in todo_list.todos]


class TestTask:
    """Tests for the Task model."""

    def test_new_task_is_uncompleted(self):
        """completed defaults to False."""
        task = Task(id=1, title="buy milk")
        assert task.completed is False
        assert task.status == STATUS_UNCOMPLETED

    def test_negative_id_rejected(self):
        """Task ids cannot be negative."""
        with pytest.raises(ValidationError):
            Task(id=-1, title="a")

    def test_mark_completed(self):
        """mark_completed sets the flag and the status label."""
        task = Task(id=1, title="buy milk")
        task.mark_completed()
        assert task.completed is True
        assert task.status == STATUS_COMPLETED


class TestTodoListAdd:
    """Tests for TodoList.add."""

    def test_empty_on_creation(self):
        """A new list holds no tasks."""
        assert TodoList().todos == []

    def test_add_to_empty_list(self):
        """First task gets id 1 and is not completed."""
        todo_list = TodoList()
        todo_list.add("buy milk")

        assert _snapshot(todo_list) == [{"id": 1, "title": "buy milk", "completed": False}]

    def test_add_returns_new_task(self):
        """add returns the task it appended."""
        todo_list = TodoList()
        task = todo_list.add("a")
        assert task is todo_list.todos[-1]

    def test_ids_follow_insertion_order(self):
        """Without removals ids run 1..n in insertion order."""
        todo_list = TodoList()
        titles = ["a", "b", "c", "d", "e"]
        for title in titles:
            todo_list.add(title)

        assert [t.id for t in todo_list.todos] == [1, 2, 3, 4, 5]
        assert [t.title for t in todo_list.todos] == titles

    def test_store_accepts_empty_title(self):
        """Rejecting empty titles is left to the front ends."""
        todo_list = TodoList()
        task = todo_list.add("")
        assert task.title == ""

    def test_title_kept_verbatim(self):
        """Titles are stored exactly as given."""
        todo_list = TodoList()
        task = todo_list.add("  spaced  [bold]markup[/] ünïcode ")
        assert task.title == "  spaced  [bold]markup[/] ünïcode "

    def test_add_after_removal_does_not_reuse_live_id(self):
        """An id freed in the middle never collides with a surviving task."""
        todo_list = TodoList()
        for title in ("a", "b", "c"):
            todo_list.add(title)
        todo_list.remove(2)

        task = todo_list.add("d")

        assert task.id == 4
        ids = [t.id for t in todo_list.todos]
        assert len(ids) == len(set(ids))


class TestTodoListComplete:
    """Tests for TodoList.complete."""

    def test_complete_marks_task(self):
        """complete sets completed on the matching task only."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.add("b")

        todo_list.complete(2)

        assert [t.completed for t in todo_list.todos] == [False, True]

    def test_complete_is_idempotent(self):
        """Completing twice succeeds and the task stays completed."""
        todo_list = TodoList()
        todo_list.add("a")

        todo_list.complete(1)
        todo_list.complete(1)

        assert todo_list.todos[0].completed is True

    def test_complete_missing_on_empty_list(self):
        """complete(99) on an empty list raises TaskNotFoundError."""
        with pytest.raises(TaskNotFoundError) as exc_info:
            TodoList().complete(99)
        assert exc_info.value.task_id == 99

    def test_complete_missing_leaves_list_unchanged(self):
        """A failed complete does not touch any task."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.add("b")
        before = _snapshot(todo_list)

        with pytest.raises(TaskNotFoundError):
            todo_list.complete(3)

        assert _snapshot(todo_list) == before


class TestTodoListRemove:
    """Tests for TodoList.remove."""

    def test_remove_keeps_other_ids(self):
        """Removing task 1 leaves task 2 with id 2."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.add("b")

        todo_list.remove(1)

        assert _snapshot(todo_list) == [{"id": 2, "title": "b", "completed": False}]

    def test_remove_returns_removed_task(self):
        """remove returns the deleted task."""
        todo_list = TodoList()
        todo_list.add("a")
        assert todo_list.remove(1).title == "a"

    def test_remove_twice_fails(self):
        """Removing the same id again raises TaskNotFoundError."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.remove(1)

        with pytest.raises(TaskNotFoundError):
            todo_list.remove(1)

    def test_remove_missing_leaves_list_unchanged(self):
        """A failed remove does not touch any task."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.complete(1)
        before = _snapshot(todo_list)

        with pytest.raises(TaskNotFoundError):
            todo_list.remove(42)

        assert _snapshot(todo_list) == before

    def test_complete_after_remove_fails(self):
        """A removed task can no longer be completed."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.remove(1)

        with pytest.raises(TaskNotFoundError):
            todo_list.complete(1)

    def test_order_preserved_after_remove(self):
        """Remaining tasks keep their relative order."""
        todo_list = TodoList()
        for title in ("a", "b", "c", "d"):
            todo_list.add(title)

        todo_list.remove(2)

        assert [t.title for t in todo_list.todos] == ["a", "c", "d"]


class TestTodoListListing:
    """Tests for TodoList.list and stats."""

    def test_empty_listing_is_explicit(self):
        """An empty list renders the no-tasks line."""
        listing = TodoList().list()
        assert listing.is_empty
        assert listing.lines() == [NO_TASKS_MESSAGE]

    def test_listing_pairs_status(self):
        """Each entry carries the status label in insertion order."""
        todo_list = TodoList()
        todo_list.add("a")
        todo_list.add("b")
        todo_list.complete(1)

        listing = todo_list.list()

        assert [(e.id, e.title, e.status) for e in listing.entries] == [
            (1, "a", STATUS_COMPLETED),
            (2, "b", STATUS_UNCOMPLETED),
        ]
        assert listing.lines() == ["completed [1] a", "uncompleted [2] b"]

    def test_listing_is_a_snapshot(self):
        """Later mutations do not change an earlier listing."""
        todo_list = TodoList()
        todo_list.add("a")
        listing = todo_list.list()

        todo_list.complete(1)
        todo_list.add("b")

        assert len(listing.entries) == 1
        assert listing.entries[0].status == STATUS_UNCOMPLETED

    def test_list_does_not_mutate(self):
        """list leaves the tasks as they were."""
        todo_list = TodoList()
        todo_list.add("a")
        before = _snapshot(todo_list)
        todo_list.list()
        assert _snapshot(todo_list) == before

    def test_stats(self):
        """stats counts total, active and completed tasks."""
        todo_list = TodoList()
        for title in ("a", "b", "c"):
            todo_list.add(title)
        todo_list.complete(3)

        stats = todo_list.stats()

        assert (stats.total, stats.active, stats.completed) == (3, 2, 1)

    def test_get_missing_raises(self):
        """get raises TaskNotFoundError for unknown ids."""
        with pytest.raises(TaskNotFoundError):
            TodoList().get(1)


class TestTodoListSerialization:
    """Tests for the JSON shape of a task list."""

    def test_field_names(self):
        """Serialized form uses todos/id/title/completed."""
        todo_list = TodoList()
        todo_list.add("buy milk")

        assert todo_list.model_dump() == {
            "todos": [{"id": 1, "title": "buy milk", "completed": False}]
        }

    def test_parse_compact_format(self):
        """Compact JSON written by older versions loads as-is."""
        data = '{"todos":[{"id":1,"title":"a","completed":true},{"id":3,"title":"c","completed":false}]}'

        todo_list = TodoList.model_validate_json(data)

        assert [(t.id, t.title, t.completed) for t in todo_list.todos] == [
            (1, "a", True),
            (3, "c", False),
        ]
