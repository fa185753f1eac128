"""Task records and the actions recorded in undo history."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

NOTHING_TO_UNDO = "Nothing to undo"

# Fields fixed at creation; only `completed` may change afterwards.
_IMMUTABLE_FIELDS = frozenset({"id", "title", "priority", "category"})


@dataclass(eq=False)
class Task:
    """A single task owned by a TaskEngine.

    Two tasks are the same entity iff their ids match, so equality and
    hashing ignore every other field.
    """

    id: int
    title: str
    priority: int
    category: str = ""
    completed: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Task.{name} cannot be changed after creation")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Task [ID={self.id}, Title={self.title}, Priority={self.priority}, "
            f"Category={self.category}, Completed={str(self.completed).lower()}]"
        )

    @property
    def sort_key(self) -> tuple[int, int]:
        """Ordering key: higher priority first, then lower id."""
        return (-self.priority, self.id)

    def to_dict(self) -> dict:
        """Convert to the plain view handed to front ends."""
        return asdict(self)


class ActionKind(Enum):
    """Kinds of mutation recorded in undo history."""

    ADD = "add"
    REMOVE = "remove"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Action:
    """A recorded mutation and the task it applied to."""

    kind: ActionKind
    task: Task


@dataclass(frozen=True)
class UndoResult:
    """What an undo reverted, for display."""

    kind: ActionKind
    task_id: int

    def describe(self) -> str:
        return f"Undid action: {self.kind.name} on Task {self.task_id}"
