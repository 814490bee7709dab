"""Slot — one managed terminal line with a fixed row and mutable text."""
from __future__ import annotations


class Slot:
    """
    A line inside a Block.

    ``content`` is what the line currently shows and may be replaced at any
    time. ``row`` is the 0-based offset from the top of the block; it is
    assigned once, when the Block takes ownership, and never changes after.
    """

    __slots__ = ("content", "_row")

    def __init__(self, content: str, row: int | None = None) -> None:
        self.content = content
        self._row = row

    @property
    def row(self) -> int | None:
        """Row within the owning block, or None while unassigned."""
        return self._row

    def update_content(self, content: str) -> None:
        self.content = content

    def _assign_row(self, row: int) -> None:
        if self._row is not None:
            raise ValueError(f"slot already placed at row {self._row}")
        self._row = row

    def __repr__(self) -> str:
        return f"Slot(content={self.content!r}, row={self._row})"
