"""
Cursor tracking for a Block.

CursorTracker is the single record of which block row the terminal cursor
sits on. Rows share the coordinate space of Slot.row; the value equal to the
slot count means the cursor is just below the block.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    NONE = "none"


@dataclass(frozen=True)
class Delta:
    """Relative movement needed to reach a target row."""

    direction: Direction
    magnitude: int

    @property
    def is_zero(self) -> bool:
        return self.magnitude == 0


class CursorTracker:
    """Holds the tracked row. Not thread-safe; callers serialize access."""

    def __init__(self, initial_row: int) -> None:
        self._current_row = initial_row

    @property
    def current_row(self) -> int:
        return self._current_row

    def delta_to(self, target_row: int) -> Delta:
        """Compute the move from the tracked row to *target_row* (no side effects)."""
        current = self._current_row
        if current > target_row:
            return Delta(Direction.UP, current - target_row)
        if current < target_row:
            return Delta(Direction.DOWN, target_row - current)
        return Delta(Direction.NONE, 0)

    def commit(self, target_row: int) -> None:
        """Record that the cursor now sits on *target_row*."""
        logger.debug("cursor row %d -> %d", self._current_row, target_row)
        self._current_row = target_row

    def __repr__(self) -> str:
        return f"CursorTracker(current_row={self._current_row})"
