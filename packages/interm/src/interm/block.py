"""
Block — a fixed set of terminal lines that can be redrawn in place.

Provides:
- Block: owns the slots, the cursor tracker and the renderer, and exposes
  goto / update / clear / cursor-visibility operations
- The teardown guarantee: the cursor is shown again exactly once when the
  block is closed, leaves a ``with`` statement, or is garbage collected

Usage preconditions:
- Only one live Block should write to a given output stream at a time. The
  block assumes it owns the terminal cursor and cannot detect other writers.
- A Block is not thread-safe. Concurrent callers must hold one lock per Block
  for the duration of a single call and release it before sleeping or
  blocking, otherwise the tracked row drifts from the real cursor.
"""
from __future__ import annotations

import logging
import weakref
from types import TracebackType
from typing import BinaryIO, Iterable, Sequence

from .config import MAX_LINES
from .cursor import CursorTracker
from .errors import (
    BlockClosedError,
    EmptyLineSetError,
    IndexNotFoundError,
    SlotNotFoundError,
    TerminalIOError,
    TooManyLinesError,
)
from .renderer import Renderer
from .slot import Slot

logger = logging.getLogger(__name__)


def _restore_cursor(renderer: Renderer) -> None:
    """Finalizer for blocks that were never closed explicitly."""
    try:
        renderer.set_cursor_visible(True)
    except TerminalIOError:
        logger.exception("Failed to restore cursor visibility for unclosed block")
    finally:
        renderer.close()


class Block:
    """
    A block of ``len(contents)`` lines at the bottom of the terminal.

    Construction reserves the space by writing one newline per line, which
    leaves the cursor just below the block. The tracked row starts at the
    slot count to reflect that.

    Example::

        with Block(["Download 0", "Download 1"]) as block:
            block.hide_cursor()
            first = block.slots[0]
            block.update(first, "Download 0: done", clear_first=True)
    """

    def __init__(
        self,
        contents: Iterable[str],
        stream: BinaryIO | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> None:
        if isinstance(contents, str):
            raise TypeError("contents must be a sequence of strings, not a single str")
        self._init(
            [Slot(content) for content in contents],
            renderer if renderer is not None else Renderer(stream),
        )

    @classmethod
    def from_slots(
        cls,
        slots: Iterable[Slot],
        stream: BinaryIO | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> Block:
        """Build a block that takes ownership of unplaced Slot objects."""
        block = cls.__new__(cls)
        block._init(list(slots), renderer if renderer is not None else Renderer(stream))
        return block

    def _init(self, slots: list[Slot], renderer: Renderer) -> None:
        if not slots:
            raise EmptyLineSetError()
        if len(slots) > MAX_LINES:
            raise TooManyLinesError(len(slots), MAX_LINES)
        for slot in slots:
            if slot.row is not None:
                raise ValueError(f"{slot!r} already belongs to a block")
        if len({id(slot) for slot in slots}) != len(slots):
            raise ValueError("the same slot appears more than once")

        # Rows are assigned only after the reservation succeeds.
        renderer.reserve(len(slots))
        for row, slot in enumerate(slots):
            slot._assign_row(row)

        self._slots: tuple[Slot, ...] = tuple(slots)
        self._cursor = CursorTracker(len(slots))
        self._renderer = renderer
        self._closed = False
        self._finalizer = weakref.finalize(self, _restore_cursor, renderer)
        logger.debug("Reserved block of %d lines", len(slots))

    # ─────────────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def slots(self) -> Sequence[Slot]:
        return self._slots

    @property
    def cursor_row(self) -> int:
        """Tracked cursor row; equals ``len(self)`` while below the block."""
        return self._cursor.current_row

    @property
    def closed(self) -> bool:
        return self._closed

    def contents(self) -> list[str]:
        return [slot.content for slot in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def goto_index(self, idx: int) -> None:
        """Move the cursor to column 0 of the slot at *idx*."""
        self._check_open()
        if not 0 <= idx < len(self._slots):
            logger.warning("Rejected index %d for block of %d lines", idx, len(self._slots))
            raise IndexNotFoundError(idx)
        self._goto_row(self._slots[idx].row)

    def goto_slot(self, slot: Slot) -> None:
        """Move the cursor to column 0 of *slot*, which must belong to this block."""
        self._check_open()
        self._goto_row(self._resolve(slot).row)

    def _check_open(self) -> None:
        if self._closed:
            raise BlockClosedError()

    def _resolve(self, slot: Slot) -> Slot:
        row = slot.row
        if row is None or not 0 <= row < len(self._slots) or self._slots[row] is not slot:
            logger.warning("Rejected foreign slot %r", slot)
            raise SlotNotFoundError(slot)
        return slot

    def _goto_row(self, row: int) -> None:
        self._move_to(row)
        self._renderer.carriage_return()

    def _move_to(self, row: int) -> None:
        delta = self._cursor.delta_to(row)
        try:
            self._renderer.move(delta)
        finally:
            # A failed write still leaves the intended row committed.
            self._cursor.commit(row)

    # ─────────────────────────────────────────────────────────────────────────
    # Drawing
    # ─────────────────────────────────────────────────────────────────────────

    def update(self, slot: Slot, content: str, clear_first: bool = True) -> None:
        """
        Redraw *slot* with *content*.

        The stored content is replaced before anything is written, so a write
        failure leaves stored and displayed text out of step.
        """
        self._check_open()
        self._resolve(slot).update_content(content)
        self.goto_slot(slot)
        if clear_first:
            self._renderer.erase_current_line()
        self._renderer.write_text(content)

    def clear_current_line(self) -> None:
        """Erase the row the cursor is on without moving it."""
        self._check_open()
        self._renderer.erase_current_line()

    def clear_all(self) -> None:
        """
        Walk from the last slot up to row 0, erasing each row on the way.

        Row 0 is where the walk ends and is not erased; the cursor is left
        there.
        """
        self._check_open()
        last = len(self._slots) - 1
        self.goto_index(last)
        for _ in range(last):
            self._renderer.erase_current_line()
            self._move_to(self._cursor.current_row - 1)

    def hide_cursor(self) -> None:
        self._check_open()
        self._renderer.set_cursor_visible(False)

    def show_cursor(self) -> None:
        self._check_open()
        self._renderer.set_cursor_visible(True)

    # ─────────────────────────────────────────────────────────────────────────
    # Teardown
    # ─────────────────────────────────────────────────────────────────────────

    def close(self) -> None:
        """
        Show the cursor and release the renderer. Safe to call repeatedly; only
        the first call writes anything. Every other operation raises
        BlockClosedError afterwards.

        A failure to show the cursor is logged and re-raised after the
        renderer has been released.
        """
        if self._closed:
            return
        self._closed = True
        self._finalizer.detach()
        try:
            self._renderer.set_cursor_visible(True)
        except TerminalIOError:
            logger.exception("Failed to restore cursor visibility")
            raise
        finally:
            self._renderer.close()

    def __enter__(self) -> Block:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.close()
        except TerminalIOError:
            # Already logged by close(); don't mask the error in flight.
            if exc_type is None:
                raise

    def __repr__(self) -> str:
        return f"Block(lines={len(self._slots)}, cursor_row={self._cursor.current_row})"
