"""Category index - category name to the ids filed under it."""

from __future__ import annotations


class CategoryIndex:
    """Mapping from category text to an insertion-ordered set of task ids.

    The empty string is an ordinary category here. Buckets persist once
    created, even after their last id is discarded.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, dict[int, None]] = {}

    def add(self, category: str, task_id: int) -> None:
        self._buckets.setdefault(category, {})[task_id] = None

    def discard(self, category: str, task_id: int) -> None:
        bucket = self._buckets.get(category)
        if bucket is not None:
            bucket.pop(task_id, None)

    def ids(self, category: str) -> list[int]:
        """Ids under a category, in insertion order. Unknown names give []."""
        return list(self._buckets.get(category, {}))

    def categories(self) -> list[str]:
        return list(self._buckets)

    def __contains__(self, category: object) -> bool:
        return category in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)
