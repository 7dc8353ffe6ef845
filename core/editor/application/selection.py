"""Cursor and range anchor over the current projection."""

from bisect import bisect_left
from typing import List, Optional, Sequence


class SelectionModel:
    """Projection-relative cursor with an optional Visual-mode anchor.

    The cursor is absent exactly when the projection is empty.
    """

    def __init__(self, projection: Sequence[int] = ()):
        self.projection: List[int] = list(projection)
        self.cursor: Optional[int] = 0 if self.projection else None
        self.anchor: Optional[int] = None

    def __len__(self) -> int:
        return len(self.projection)

    def set_projection(self, projection: Sequence[int]) -> None:
        """Swap in a recomputed projection and clamp cursor and anchor."""
        self.projection = list(projection)
        self.cursor = self._clamp(self.cursor, default=0)
        if self.anchor is not None:
            self.anchor = self._clamp(self.anchor, default=None)

    def _clamp(self, position: Optional[int], default: Optional[int]) -> Optional[int]:
        if not self.projection:
            return None
        if position is None:
            return default
        return max(0, min(position, len(self.projection) - 1))

    # Movement -------------------------------------------------------------

    def move_next(self) -> None:
        if not self.projection:
            return
        if self.cursor is None or self.cursor >= len(self.projection) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def move_previous(self) -> None:
        if not self.projection:
            return
        if self.cursor is None or self.cursor >= len(self.projection):
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = len(self.projection) - 1
        else:
            self.cursor -= 1

    def jump_first(self) -> None:
        if self.projection:
            self.cursor = 0

    def jump_last(self) -> None:
        if self.projection:
            self.cursor = len(self.projection) - 1

    # Mapping --------------------------------------------------------------

    def store_index(self, position: Optional[int]) -> Optional[int]:
        if position is None or not 0 <= position < len(self.projection):
            return None
        return self.projection[position]

    def current_store_index(self) -> Optional[int]:
        return self.store_index(self.cursor)

    def position_of_store_index(self, store_index: Optional[int]) -> Optional[int]:
        """Projection position for a store index.

        A store index hidden by the filter maps to the next visible item,
        or the last one when nothing follows it.
        """
        if not self.projection:
            return None
        if store_index is None:
            return 0
        pos = bisect_left(self.projection, store_index)
        return min(pos, len(self.projection) - 1)

    def place_at_store_index(self, store_index: Optional[int]) -> None:
        self.cursor = self.position_of_store_index(store_index)

    # Visual range ----------------------------------------------------------

    def start_range(self) -> None:
        self.anchor = self.cursor

    def clear_range(self) -> None:
        self.anchor = None

    def range_positions(self) -> List[int]:
        """Inclusive anchor..cursor positions, ascending, whichever comes first."""
        if self.anchor is None:
            return []
        if self.cursor is None:
            return [self.anchor]
        start, end = sorted((self.anchor, self.cursor))
        return list(range(start, end + 1))

    def positions(self, visual: bool) -> List[int]:
        if visual:
            return self.range_positions()
        return [self.cursor] if self.cursor is not None else []

    def store_indices(self, positions: Sequence[int]) -> List[int]:
        result: List[int] = []
        for pos in positions:
            idx = self.store_index(pos)
            if idx is not None:
                result.append(idx)
        return result

    # Repair ---------------------------------------------------------------

    def repair_after_delete(self, first_deleted_position: int) -> None:
        """Stay at the visual slot of the first deleted row, clamped."""
        if not self.projection:
            self.cursor = None
            return
        self.cursor = min(max(0, first_deleted_position), len(self.projection) - 1)


__all__ = ["SelectionModel"]
