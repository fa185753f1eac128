"""Tests for taskq.models module."""

from __future__ import annotations

import pytest

from taskq.models import NOTHING_TO_UNDO, Action, ActionKind, Task, UndoResult


class TestTask:
    """Tests for Task record."""

    def test_defaults(self) -> None:
        """Test default values."""
        task = Task(id=1, title="Buy milk", priority=3)
        assert task.category == ""
        assert task.completed is False

    def test_identity_fields_are_immutable(self) -> None:
        """Test id, title, priority and category cannot be reassigned."""
        task = Task(id=1, title="Buy milk", priority=3, category="errand")

        for name, value in [("id", 9), ("title", "x"), ("priority", 1), ("category", "y")]:
            with pytest.raises(AttributeError):
                setattr(task, name, value)

        assert task.id == 1
        assert task.priority == 3

    def test_completed_is_mutable(self) -> None:
        """Test completion flag can change."""
        task = Task(id=1, title="Buy milk", priority=3)
        task.completed = True
        assert task.completed is True

    def test_equality_by_id_only(self) -> None:
        """Test tasks with the same id are the same entity."""
        a = Task(id=1, title="Buy milk", priority=3)
        b = Task(id=1, title="Something else", priority=5, completed=True)
        c = Task(id=2, title="Buy milk", priority=3)

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison with non-tasks."""
        assert Task(id=1, title="a", priority=1) != 1

    def test_sort_key(self) -> None:
        """Test key orders higher priority first, then lower id."""
        tasks = [
            Task(id=3, title="c", priority=3),
            Task(id=1, title="a", priority=3),
            Task(id=2, title="b", priority=5),
        ]
        assert [t.id for t in sorted(tasks, key=lambda t: t.sort_key)] == [2, 1, 3]

    def test_to_dict(self) -> None:
        """Test task view contains all fields."""
        task = Task(id=4, title="Pay rent", priority=5, category="finance")
        assert task.to_dict() == {
            "id": 4,
            "title": "Pay rent",
            "priority": 5,
            "category": "finance",
            "completed": False,
        }

    def test_str(self) -> None:
        """Test human readable form."""
        task = Task(id=1, title="Buy milk", priority=3, category="errand")
        assert str(task) == (
            "Task [ID=1, Title=Buy milk, Priority=3, Category=errand, Completed=false]"
        )


class TestUndoResult:
    """Tests for UndoResult."""

    def test_describe(self) -> None:
        """Test description names the action and task."""
        result = UndoResult(kind=ActionKind.REMOVE, task_id=2)
        assert result.describe() == "Undid action: REMOVE on Task 2"

    def test_nothing_to_undo_message(self) -> None:
        """Test sentinel message text."""
        assert NOTHING_TO_UNDO == "Nothing to undo"


class TestAction:
    """Tests for Action."""

    def test_action_is_frozen(self) -> None:
        """Test recorded actions cannot be altered."""
        action = Action(ActionKind.ADD, Task(id=1, title="a", priority=1))
        with pytest.raises(AttributeError):
            action.kind = ActionKind.REMOVE  # type: ignore[misc]
