"""Priority index - tasks ordered by (priority desc, id asc)."""

from __future__ import annotations

import bisect
from collections.abc import Iterator

from taskq.models import Task


class PriorityIndex:
    """Ordered set of tasks keyed by `Task.sort_key`.

    The key is the only source of ordering truth. Lookups for removal go
    through the same key, so a task is found by its priority and id rather
    than by object identity.
    """

    def __init__(self) -> None:
        self._keys: list[tuple[int, int]] = []
        self._tasks: dict[tuple[int, int], Task] = {}

    def add(self, task: Task) -> bool:
        """Insert a task. Returns False if its key is already present."""
        key = task.sort_key
        if key in self._tasks:
            return False

        bisect.insort(self._keys, key)
        self._tasks[key] = task
        return True

    def remove(self, task: Task) -> bool:
        """Remove the entry matching the task's key. Returns True if removed."""
        key = task.sort_key
        if key not in self._tasks:
            return False

        position = bisect.bisect_left(self._keys, key)
        del self._keys[position]
        del self._tasks[key]
        return True

    def peek(self) -> Task | None:
        """Return the most important task without removing it."""
        if not self._keys:
            return None
        return self._tasks[self._keys[0]]

    def poll(self) -> Task | None:
        """Remove and return the most important task."""
        if not self._keys:
            return None
        key = self._keys.pop(0)
        return self._tasks.pop(key)

    def ids(self) -> list[int]:
        """Task ids in priority order."""
        return [task_id for _, task_id in self._keys]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, task: object) -> bool:
        return isinstance(task, Task) and task.sort_key in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return (self._tasks[key] for key in list(self._keys))
