"""Extraction log with undo/redo and named checkpoints.

Every successful extraction is stored with the token list as it was before
and after, so undo and redo simply restore a snapshot. The log is
cursor-based: ``cursor`` always points one past the last applied event.
Appending when cursor < len truncates the redo tail.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExtractionEvent:
    """One applied extraction (or reparse)."""

    verb: str
    detail: str = ""
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)


class ExtractionLog:
    """Linear log of extraction events with named checkpoints."""

    def __init__(self) -> None:
        self._events: list[ExtractionEvent] = []
        self._cursor: int = 0
        self._checkpoints: dict[str, int] = {}

    @property
    def cursor(self) -> int:
        """Current cursor position (one past last applied event)."""
        return self._cursor

    def __len__(self) -> int:
        """Number of applied events."""
        return self._cursor

    def _truncate(self) -> None:
        if self._cursor < len(self._events):
            del self._events[self._cursor :]
            self._checkpoints = {
                name: pos
                for name, pos in self._checkpoints.items()
                if pos <= self._cursor
            }

    def append(self, event: ExtractionEvent) -> None:
        """Add *event* at the cursor, dropping any redo tail."""
        self._truncate()
        self._events.append(event)
        self._cursor += 1

    def checkpoint(self, name: str) -> None:
        """Record the current cursor position under *name*."""
        self._truncate()
        self._checkpoints[name] = self._cursor

    def checkpoints(self) -> dict[str, int]:
        return dict(self._checkpoints)

    def undo(self, count: int = 1) -> list[ExtractionEvent]:
        """Move the cursor back by up to *count* events.

        Returns the undone events, most-recent-first.
        """
        undone: list[ExtractionEvent] = []
        while len(undone) < count and self._cursor > 0:
            self._cursor -= 1
            undone.append(self._events[self._cursor])
        return undone

    def undo_to(self, name: str) -> list[ExtractionEvent] | None:
        """Undo back to the named checkpoint.

        Returns events most-recent-first, or None if the checkpoint is
        unknown.
        """
        target = self._checkpoints.get(name)
        if target is None:
            return None
        return self.undo(max(self._cursor - target, 0))

    def redo(self, count: int = 1) -> list[ExtractionEvent]:
        """Re-apply up to *count* events. Returns them in forward order."""
        replayed: list[ExtractionEvent] = []
        while len(replayed) < count and self._cursor < len(self._events):
            replayed.append(self._events[self._cursor])
            self._cursor += 1
        return replayed

    def recent(self, count: int = 5) -> list[ExtractionEvent]:
        """The last *count* applied events, oldest first."""
        start = max(self._cursor - count, 0)
        return self._events[start : self._cursor]
