"""Undo/redo history over pattern parameters."""

from collections.abc import Callable
from typing import Any

import structlog

from stitchpattern.config import StyleParameters
from stitchpattern.exceptions import StorageUnavailableError

SnapshotSink = Callable[[StyleParameters], None]


class ParameterHistory:
    """Linear undo stack of parameter snapshots.

    The history is a list of immutable snapshots plus a cursor. Pushing
    after an undo discards every snapshot past the cursor. Each editing
    session owns its own history.

    An optional snapshot sink is told about every new current entry. The
    in-memory transition is committed before the sink runs, so a sink that
    raises StorageUnavailableError cannot corrupt the history.

    Example:
        history = ParameterHistory()
        history.seed(StyleParameters())
        history.update(threshold=100)
        history.undo()
    """

    def __init__(self, snapshot_sink: SnapshotSink | None = None) -> None:
        """Initialize an empty history.

        Args:
            snapshot_sink: Optional callback receiving each new current entry
        """
        self._entries: list[StyleParameters] = []
        self._cursor = -1
        self._snapshot_sink = snapshot_sink
        self._logger = structlog.get_logger(__name__)

    @property
    def entries(self) -> tuple[StyleParameters, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        """Index of the current entry, -1 before the history is seeded."""
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return 0 <= self._cursor < len(self._entries) - 1

    def current(self) -> StyleParameters | None:
        """Return the entry at the cursor, or None before seeding."""
        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    def seed(self, initial: StyleParameters) -> None:
        """Reset the history to a single entry."""
        self._entries = [initial]
        self._cursor = 0
        self._notify(initial)

    def push(self, params: StyleParameters) -> bool:
        """Record a new snapshot.

        Does nothing if ``params`` equals the current entry. Otherwise
        drops any redo entries and appends.

        Args:
            params: New parameter snapshot

        Returns:
            True if the history changed
        """
        if params == self.current():
            return False
        del self._entries[self._cursor + 1:]
        self._entries.append(params)
        self._cursor = len(self._entries) - 1
        self._notify(params)
        return True

    def update(self, **changes: Any) -> bool:
        """Push the current entry with some fields replaced.

        Raises:
            RuntimeError: If the history has not been seeded
            pydantic.ValidationError: If a replaced value is invalid
        """
        current = self.current()
        if current is None:
            raise RuntimeError("History not seeded. Call seed() first.")
        return self.push(current.with_changes(**changes))

    def undo(self) -> bool:
        """Step back one entry. Returns True if the cursor moved."""
        if not self.can_undo:
            return False
        self._cursor -= 1
        self._notify(self._entries[self._cursor])
        return True

    def redo(self) -> bool:
        """Step forward one entry. Returns True if the cursor moved."""
        if not self.can_redo:
            return False
        self._cursor += 1
        self._notify(self._entries[self._cursor])
        return True

    def _notify(self, entry: StyleParameters) -> None:
        if self._snapshot_sink is None:
            return
        try:
            self._snapshot_sink(entry)
        except StorageUnavailableError as e:
            self._logger.warning(
                "Snapshot not stored",
                reason=e.reason,
                cursor=self._cursor,
                entries=len(self._entries),
            )
