"""
interm — redraw a fixed block of terminal lines in place.

A Block reserves one terminal line per slot and moves the cursor between
them with relative escape sequences, so any line can be rewritten while the
others stay where they are.
"""
from .block import Block
from .config import MAX_LINES
from .cursor import CursorTracker, Delta, Direction
from .errors import (
    BlockClosedError,
    EmptyLineSetError,
    IndexNotFoundError,
    IntermError,
    SlotNotFoundError,
    TerminalIOError,
    TooManyLinesError,
)
from .renderer import Renderer
from .slot import Slot

__version__ = "0.1.1"

__all__ = [
    # Core
    "Block",
    "Slot",
    "CursorTracker",
    "Delta",
    "Direction",
    "Renderer",
    "MAX_LINES",
    # Errors
    "BlockClosedError",
    "IntermError",
    "EmptyLineSetError",
    "TooManyLinesError",
    "SlotNotFoundError",
    "IndexNotFoundError",
    "TerminalIOError",
]
