"""Task engine - the authoritative store plus its indexes and undo history.

Every mutation updates the task store first, then the priority index, then
the category index, and finally records history. Undo applies the inverse
through the same helpers but never records anything itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskq.category_index import CategoryIndex
from taskq.history import UndoHistory
from taskq.models import NOTHING_TO_UNDO, Action, ActionKind, Task, UndoResult
from taskq.priority_index import PriorityIndex

if TYPE_CHECKING:
    from taskq.config import TaskqConfig

logger = logging.getLogger(__name__)


class TaskEngine:
    """Single-user, in-memory task engine.

    All state lives on the instance, so independent engines never share ids,
    tasks or history. Callers are expected to serialise access.
    """

    def __init__(self, history: UndoHistory | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        self._priority = PriorityIndex()
        self._categories = CategoryIndex()
        self._history = history if history is not None else UndoHistory()
        self._next_id = 1

    @classmethod
    def from_config(cls, config: TaskqConfig) -> TaskEngine:
        """Create an engine with history settings taken from config."""
        return cls(history=UndoHistory(max_entries=config.history.max_entries))

    @property
    def priority_index(self) -> PriorityIndex:
        return self._priority

    @property
    def category_index(self) -> CategoryIndex:
        return self._categories

    @property
    def history(self) -> UndoHistory:
        return self._history

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    def add_task(self, title: str, priority: int, category: str = "") -> int:
        """Create a task and return its id.

        Ids come from an engine-wide counter and are never reused, even
        after the task is removed or its creation is undone.
        """
        task = Task(id=self._next_id, title=title, priority=priority, category=category)
        self._next_id += 1

        self._insert(task)
        self._history.record(Action(ActionKind.ADD, task))
        logger.debug("Added task %d (priority=%d, category=%r)", task.id, priority, category)
        return task.id

    def remove_task(self, task_id: int) -> bool:
        """Remove a task. Returns False, with no side effects, if absent."""
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Remove skipped: task %d not found", task_id)
            return False

        self._discard(task)
        self._history.record(Action(ActionKind.REMOVE, task))
        logger.debug("Removed task %d", task_id)
        return True

    def complete_task(self, task_id: int) -> bool:
        """Mark a task completed.

        Returns False if the task is absent. Completing an already completed
        task succeeds without recording history.
        """
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Complete skipped: task %d not found", task_id)
            return False

        if task.completed:
            return True

        task.completed = True
        self._history.record(Action(ActionKind.COMPLETE, task))
        logger.debug("Completed task %d", task_id)
        return True

    def undo(self) -> UndoResult | None:
        """Revert the most recent applied action.

        Returns None when there is nothing to undo. The inverse is applied
        directly and does not itself appear in history.
        """
        action = self._history.undo()
        if action is None:
            logger.debug("Undo requested with empty history")
            return None

        task = action.task
        if action.kind is ActionKind.ADD:
            self._discard(task)
        elif action.kind is ActionKind.REMOVE:
            self._insert(task)
        elif action.kind is ActionKind.COMPLETE:
            task.completed = False

        logger.debug("Undid %s on task %d", action.kind.name, task.id)
        return UndoResult(kind=action.kind, task_id=task.id)

    def undo_message(self) -> str:
        """Undo and describe the outcome for display."""
        result = self.undo()
        return result.describe() if result is not None else NOTHING_TO_UNDO

    def get_task(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def get_tasks_by_category(self, category: str) -> list[Task]:
        """Browse tasks by category.

        An empty category returns every task in store order. Otherwise the
        tasks filed under that category are returned in index order, with no
        priority ordering.
        """
        if not category:
            return list(self._tasks.values())

        return [
            self._tasks[task_id]
            for task_id in self._categories.ids(category)
            if task_id in self._tasks
        ]

    def list_tasks(self, category: str | None = None) -> list[dict]:
        """Task views for a category, or for all tasks when None/empty."""
        return [task.to_dict() for task in self.get_tasks_by_category(category or "")]

    def get_highest_priority_task(self) -> Task | None:
        """Peek at the most important task."""
        return self._priority.peek()

    peek_top_priority = get_highest_priority_task

    def categories(self) -> list[str]:
        return self._categories.categories()

    def _insert(self, task: Task) -> None:
        self._tasks[task.id] = task
        self._priority.add(task)
        self._categories.add(task.category, task.id)

    def _discard(self, task: Task) -> None:
        self._tasks.pop(task.id, None)
        self._priority.remove(task)
        self._categories.discard(task.category, task.id)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks
