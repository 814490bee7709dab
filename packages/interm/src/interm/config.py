"""
Environment-driven configuration.

INTERM_WRITE_LOG   mirror every byte a Renderer writes into this file
INTERM_DEBUG_LOG   file the CLI sends log records to
INTERM_DEMO_COUNT  default number of lines in ``interm demo``
"""
from __future__ import annotations

import os

# Row deltas must fit an unsigned byte, which bounds the block size.
MAX_LINES: int = 255

ENV_WRITE_LOG: str = "INTERM_WRITE_LOG"
ENV_DEBUG_LOG: str = "INTERM_DEBUG_LOG"
ENV_DEMO_COUNT: str = "INTERM_DEMO_COUNT"

DEFAULT_DEMO_COUNT: int = 10


def get_write_log_path() -> str | None:
    return os.environ.get(ENV_WRITE_LOG, "").strip() or None


def get_debug_log_path() -> str | None:
    return os.environ.get(ENV_DEBUG_LOG, "").strip() or None


def get_demo_count() -> int:
    """Default demo size; falls back to DEFAULT_DEMO_COUNT on bad input."""
    raw = os.environ.get(ENV_DEMO_COUNT, "").strip()
    if not raw:
        return DEFAULT_DEMO_COUNT
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_DEMO_COUNT
    if value < 1 or value > MAX_LINES:
        return DEFAULT_DEMO_COUNT
    return value
