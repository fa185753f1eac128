"""Undo history - append-only action log with a cursor.

The cursor points at the most recently applied action that has not been
undone. Entries after the cursor form the redo branch; recording a new
action truncates that branch before appending, so undone actions cannot be
replayed once something new happens.
"""

from __future__ import annotations

import logging

from taskq.models import Action

logger = logging.getLogger(__name__)


class UndoHistory:
    """Linear action log supporting a single direction of undo."""

    def __init__(self, max_entries: int | None = None) -> None:
        """Create an empty history.

        Args:
            max_entries: Optional cap on retained entries. When exceeded the
                oldest entries are dropped. None keeps everything.

        Raises:
            ValueError: If max_entries is less than 1
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")

        self.max_entries = max_entries
        self._entries: list[Action] = []
        self._cursor = -1

    @property
    def cursor(self) -> int:
        """Index of the last applied action, or -1 when nothing is applied."""
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor >= 0

    @property
    def applied(self) -> list[Action]:
        """Actions applied and not yet undone, oldest first."""
        return self._entries[: self._cursor + 1]

    @property
    def redo_branch(self) -> list[Action]:
        """Undone actions that the next `record` will discard."""
        return self._entries[self._cursor + 1 :]

    def record(self, action: Action) -> None:
        """Append an action after the cursor, discarding any redo branch."""
        discarded = len(self._entries) - (self._cursor + 1)
        if discarded:
            del self._entries[self._cursor + 1 :]
            logger.debug("Discarded %d undone action(s) from history", discarded)

        self._entries.append(action)

        if self.max_entries is not None and len(self._entries) > self.max_entries:
            overflow = len(self._entries) - self.max_entries
            del self._entries[:overflow]
            logger.debug("Dropped %d oldest action(s) over history cap", overflow)

        self._cursor = len(self._entries) - 1
        logger.debug("Recorded %s on task %d", action.kind.name, action.task.id)

    def undo(self) -> Action | None:
        """Return the action at the cursor and step back, or None if empty."""
        if self._cursor < 0:
            return None

        action = self._entries[self._cursor]
        self._cursor -= 1
        return action

    def __len__(self) -> int:
        return len(self._entries)
