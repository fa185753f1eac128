"""taskq - in-memory task engine with priority ordering and undo."""

from __future__ import annotations

__version__ = "0.1.0"

from taskq.engine import TaskEngine
from taskq.models import NOTHING_TO_UNDO, Action, ActionKind, Task, UndoResult

__all__ = [
    "NOTHING_TO_UNDO",
    "Action",
    "ActionKind",
    "Task",
    "TaskEngine",
    "UndoResult",
    "__version__",
]
