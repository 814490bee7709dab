"""
Renderer — turns cursor intents into escape sequences on a byte stream.

Every public method performs exactly one write followed by a synchronous
flush, so nothing is left buffered between operations. Failures surface as
TerminalIOError; nothing is retried.
"""
from __future__ import annotations

import logging
import sys
from typing import BinaryIO, TextIO

from .config import get_write_log_path
from .cursor import Delta, Direction
from .errors import TerminalIOError

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Control sequences
# ─────────────────────────────────────────────────────────────────────────────

CSI = "\x1b["
CR = "\r"
LF = "\n"

MOVE_UP_FMT = CSI + "{}F"
MOVE_DOWN_FMT = CSI + "{}E"
ERASE_LINE = CSI + "2K" + CR
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"


class Renderer:
    """
    Writes to *stream* (defaults to the process's binary stdout).

    When *write_log_path* is given, or INTERM_WRITE_LOG is set, every chunk is
    also appended to that file for debugging.
    """

    def __init__(
        self,
        stream: BinaryIO | None = None,
        write_log_path: str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout.buffer
        self._encoding = encoding
        self._write_log_path = write_log_path if write_log_path is not None else get_write_log_path()
        self._write_log: TextIO | None = None

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    # ─────────────────────────────────────────────────────────────────────────
    # Movement
    # ─────────────────────────────────────────────────────────────────────────

    def move_up(self, n: int) -> None:
        """Move up *n* lines to column 0. Nothing is written when n == 0."""
        if n < 0:
            raise ValueError(f"line count must be non-negative, got {n}")
        if n == 0:
            return
        self._emit(MOVE_UP_FMT.format(n))

    def move_down(self, n: int) -> None:
        """Move down *n* lines to column 0. Nothing is written when n == 0."""
        if n < 0:
            raise ValueError(f"line count must be non-negative, got {n}")
        if n == 0:
            return
        self._emit(MOVE_DOWN_FMT.format(n))

    def move(self, delta: Delta) -> None:
        if delta.direction is Direction.UP:
            self.move_up(delta.magnitude)
        elif delta.direction is Direction.DOWN:
            self.move_down(delta.magnitude)

    def carriage_return(self) -> None:
        self._emit(CR)

    # ─────────────────────────────────────────────────────────────────────────
    # Content
    # ─────────────────────────────────────────────────────────────────────────

    def erase_current_line(self) -> None:
        """Erase the whole line the cursor is on and return to column 0."""
        self._emit(ERASE_LINE)

    def write_text(self, text: str) -> None:
        """Write *text* framed by carriage returns so it starts and ends at column 0."""
        self._emit(CR + text + CR)

    def reserve(self, lines: int) -> None:
        """Push *lines* blank lines so the block has room on screen."""
        self._emit(LF * lines)

    def set_cursor_visible(self, visible: bool) -> None:
        self._emit(SHOW_CURSOR if visible else HIDE_CURSOR)

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def close(self) -> None:
        """Release the write log. The output stream itself is not owned."""
        if self._write_log is not None:
            try:
                self._write_log.close()
            finally:
                self._write_log = None

    def _emit(self, data: str) -> None:
        payload = data.encode(self._encoding)
        try:
            self._stream.write(payload)
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise TerminalIOError(f"failed to write to terminal: {exc}") from exc
        if self._write_log_path:
            self._log_write(data)

    def _log_write(self, data: str) -> None:
        try:
            if self._write_log is None:
                self._write_log = open(self._write_log_path, "a", encoding="utf-8", newline="")
            self._write_log.write(data)
            self._write_log.flush()
        except OSError:
            logger.warning("Disabling write log %s", self._write_log_path, exc_info=True)
            self._write_log_path = None
            self.close()
