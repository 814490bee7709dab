"""
Concurrent download simulation rendered through a single Block.

Each simulated download owns one line and redraws it as a progress bar. All
tasks share one asyncio.Lock: it is held for a single ``update`` call and
released before sleeping, so no task starves the others.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import BinaryIO

from .block import Block
from .slot import Slot

logger = logging.getLogger(__name__)

BAR_WIDTH = 50
DEFAULT_STEPS = 100
DEFAULT_DELAY_MS = 100

_BLUE = "\x1b[34m"
_RESET = "\x1b[0m"


def format_progress(name: str, progress: float) -> str:
    """Render ``name: [=====>    ] 42.0%`` for *progress* in [0, 1]."""
    bar = "=" * int(progress * (BAR_WIDTH - 1)) + ">"
    return f"{name}: [{bar:<{BAR_WIDTH}}] {progress * 100:.1f}%"


def format_complete(name: str) -> str:
    return f"{_BLUE}{name}: Complete{_RESET}"


async def download(
    block: Block,
    lock: asyncio.Lock,
    slot: Slot,
    name: str,
    delay: float,
    steps: int = DEFAULT_STEPS,
) -> None:
    for i in range(steps + 1):
        content = format_progress(name, i / steps)
        async with lock:
            block.update(slot, content, clear_first=True)
        await asyncio.sleep(delay)

    async with lock:
        block.update(slot, format_complete(name), clear_first=True)


async def run_demo(
    count: int,
    delay_ms: int = DEFAULT_DELAY_MS,
    seed: int | None = None,
    steps: int = DEFAULT_STEPS,
    stream: BinaryIO | None = None,
) -> list[str]:
    """
    Run *count* simulated downloads and return the final slot contents.

    Each download sleeps ``delay_ms * (r // 100)`` milliseconds between steps,
    with r a random byte, so downloads finish at visibly different speeds.
    """
    rng = random.Random(seed)
    names = [f"Download {idx}" for idx in range(count)]

    with Block(names, stream) as block:
        lock = asyncio.Lock()
        block.hide_cursor()

        tasks = []
        for slot, name in zip(block.slots, names):
            delay = delay_ms * (rng.randint(0, 255) // 100) / 1000
            tasks.append(asyncio.create_task(download(block, lock, slot, name, delay, steps)))
        logger.debug("Started %d downloads", len(tasks))

        await asyncio.gather(*tasks)

        final = block.contents()
        block.clear_all()
        block.show_cursor()
    return final
