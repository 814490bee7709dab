"""
Exception hierarchy for interm.

Every error raised by the library derives from IntermError, and each one
also subclasses the builtin that callers would naturally catch.
"""
from __future__ import annotations

from typing import Any


class IntermError(Exception):
    """Base class for all interm errors."""


class EmptyLineSetError(IntermError, ValueError):
    """A Block was constructed without any lines."""

    def __init__(self) -> None:
        super().__init__("cannot build a block from an empty set of lines")


class TooManyLinesError(IntermError, ValueError):
    """A Block was constructed with more lines than the row delta can address."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"block has {count} lines, at most {limit} are supported")


class SlotNotFoundError(IntermError, LookupError):
    """The slot passed in does not belong to this Block."""

    def __init__(self, slot: Any) -> None:
        self.slot = slot
        super().__init__(f"slot {slot!r} not found")


class IndexNotFoundError(IntermError, IndexError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"index {index} not found")


class TerminalIOError(IntermError, OSError):
    """Writing to or flushing the output stream failed."""


class BlockClosedError(IntermError):
    """An operation was attempted on a Block that has already been closed."""

    def __init__(self) -> None:
        super().__init__("block is closed")
