"""Tests for interm.demo"""
import asyncio
import io

import pytest

from interm.block import Block
from interm.demo import BAR_WIDTH, download, format_complete, format_progress, run_demo
from interm.renderer import SHOW_CURSOR


class TestFormatProgress:
    def test_start(self):
        line = format_progress("Download 0", 0.0)
        assert line == "Download 0: [>" + " " * (BAR_WIDTH - 1) + "] 0.0%"

    def test_finish(self):
        line = format_progress("Download 3", 1.0)
        assert line == "Download 3: [" + "=" * (BAR_WIDTH - 1) + ">] 100.0%"

    def test_halfway(self):
        line = format_progress("d", 0.5)
        assert "=" * 24 + ">" in line
        assert line.endswith("] 50.0%")

    def test_complete_is_blue(self):
        assert format_complete("Download 1") == "\x1b[34mDownload 1: Complete\x1b[0m"


@pytest.mark.asyncio
async def test_download_ends_complete():
    stream = io.BytesIO()
    block = Block(["Download 0", "Download 1"], stream)
    lock = asyncio.Lock()
    await download(block, lock, block.slots[1], "Download 1", delay=0, steps=4)
    assert block.contents() == ["Download 0", format_complete("Download 1")]
    assert block.cursor_row == 1
    block.close()


@pytest.mark.asyncio
async def test_download_releases_lock_between_steps():
    block = Block(["a", "b"], io.BytesIO())
    lock = asyncio.Lock()
    seen_unlocked = []

    async def watcher():
        for _ in range(3):
            async with lock:
                seen_unlocked.append(True)
            await asyncio.sleep(0)

    await asyncio.gather(
        download(block, lock, block.slots[0], "a", delay=0, steps=5),
        watcher(),
    )
    assert len(seen_unlocked) == 3
    block.close()


@pytest.mark.asyncio
async def test_run_demo_renders_every_line():
    stream = io.BytesIO()
    final = await run_demo(3, delay_ms=0, seed=1, steps=3, stream=stream)
    assert final == [format_complete(f"Download {i}") for i in range(3)]
    output = stream.getvalue()
    assert output.startswith(b"\n\n\n\x1b[?25l")
    assert output.endswith(SHOW_CURSOR.encode() * 2)


@pytest.mark.slow
@pytest.mark.asyncio
async def test_run_demo_with_real_delays():
    stream = io.BytesIO()
    final = await run_demo(2, delay_ms=10, seed=7, steps=10, stream=stream)
    assert len(final) == 2
