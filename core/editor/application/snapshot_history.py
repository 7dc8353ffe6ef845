"""In-memory undo/redo history of whole-list snapshots."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from core import Todo

# History configuration
MAX_HISTORY_SIZE = 100  # Maximum snapshots to keep


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of the list plus the cursor as a store index."""

    todos: Tuple[Todo, ...]
    cursor: Optional[int]


@dataclass
class SnapshotHistory:
    """Branch-truncating undo/redo log.

    ``index`` points just past the newest entry after a capture. Entries at or
    after ``index`` are a redo-able future until the next capture discards
    them.
    """

    capacity: int = MAX_HISTORY_SIZE
    entries: Deque[Snapshot] = field(default_factory=deque)
    index: int = 0

    def __post_init__(self):
        if self.capacity < 2:
            raise ValueError("history capacity must be at least 2")

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index + 1 < len(self.entries)

    def _append(self, snapshot: Snapshot) -> None:
        self.entries.append(snapshot)
        while len(self.entries) > self.capacity:
            self.entries.popleft()
            self.index = max(0, self.index - 1)

    def capture(self, todos: Tuple[Todo, ...], cursor: Optional[int]) -> None:
        """Record the state before a mutation, dropping any redo future."""
        while len(self.entries) > self.index:
            self.entries.pop()
        self._append(Snapshot(todos=tuple(todos), cursor=cursor))
        self.index = len(self.entries)

    def undo(self, todos: Tuple[Todo, ...], cursor: Optional[int]) -> Optional[Snapshot]:
        """Step back one entry and return it, or None when nothing is left.

        The live state is recorded on the first undo after a capture so a
        following redo can return to it.
        """
        if not self.can_undo:
            return None
        if self.index == len(self.entries):
            self._append(Snapshot(todos=tuple(todos), cursor=cursor))
            self.index = len(self.entries) - 1
        self.index -= 1
        return self.entries[self.index]

    def redo(self) -> Optional[Snapshot]:
        if not self.can_redo:
            return None
        self.index += 1
        return self.entries[self.index]

    def clear(self) -> None:
        self.entries.clear()
        self.index = 0


__all__ = ["MAX_HISTORY_SIZE", "Snapshot", "SnapshotHistory"]
