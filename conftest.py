"""
Root conftest.py — hermetic environment, shared output fixtures, custom markers.

Markers:
  @pytest.mark.slow   — runs the demo with real delays; skipped unless
                        INTERM_SLOW_TESTS=1 or --slow is given
"""
from __future__ import annotations

import io
import os

import pyte
import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_interm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop INTERM_* variables from the developer's shell for every test."""
    for key in list(os.environ):
        if key.startswith("INTERM_") and key != "INTERM_SLOW_TESTS":
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------

class RecordingStream(io.BytesIO):
    """BytesIO that remembers each write and counts flushes."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[bytes] = []
        self.flushes = 0

    def write(self, data) -> int:
        self.chunks.append(bytes(data))
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class VirtualScreen:
    """A pyte VT100 screen fed with whatever a Block wrote."""

    def __init__(self, columns: int = 80, rows: int = 24) -> None:
        self.screen = pyte.Screen(columns, rows)
        self._stream = pyte.Stream(self.screen)

    def feed(self, data: bytes) -> None:
        self._stream.feed(data.decode("utf-8"))

    @property
    def lines(self) -> list[str]:
        return [line.rstrip() for line in self.screen.display]

    @property
    def cursor_row(self) -> int:
        return self.screen.cursor.y

    @property
    def cursor_col(self) -> int:
        return self.screen.cursor.x

    @property
    def cursor_hidden(self) -> bool:
        return self.screen.cursor.hidden


@pytest.fixture
def stream() -> RecordingStream:
    return RecordingStream()


@pytest.fixture
def virtual_screen() -> VirtualScreen:
    return VirtualScreen()


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "slow: runs with real delays (run with INTERM_SLOW_TESTS=1 or --slow flag)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.slow tests unless --slow flag or INTERM_SLOW_TESTS=1 is set."""
    run_slow = config.getoption("--slow") or os.environ.get("INTERM_SLOW_TESTS", "").lower() in ("1", "true", "yes")
    skip_slow = pytest.mark.skip(reason="Slow test — run with --slow or INTERM_SLOW_TESTS=1")
    for item in items:
        if "slow" in item.keywords and not run_slow:
            item.add_marker(skip_slow)
