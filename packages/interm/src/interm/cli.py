"""
CLI entry point for interm.

Commands:
- demo: redraw several concurrent progress bars in place
"""
from __future__ import annotations

import asyncio
import logging
import signal
from typing import Optional

import typer
from rich.console import Console

from .config import MAX_LINES, get_debug_log_path, get_demo_count
from .demo import DEFAULT_DELAY_MS, DEFAULT_STEPS, run_demo
from .errors import IntermError

app = typer.Typer(
    name="interm",
    help="Redraw fixed terminal lines in place",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging() -> None:
    # stdout belongs to the block, so records only ever go to a file.
    path = get_debug_log_path()
    if not path:
        return
    logging.basicConfig(
        filename=path,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _raise_system_exit(signum: int, frame: object) -> None:
    raise SystemExit(128 + signum)


@app.callback()
def main_callback() -> None:
    """Redraw fixed terminal lines in place."""
    _configure_logging()


@app.command()
def demo(
    count: Optional[int] = typer.Option(
        None, "--count", "-n", min=1, max=MAX_LINES, help="Number of downloads (default: $INTERM_DEMO_COUNT or 10)"
    ),
    delay_ms: int = typer.Option(DEFAULT_DELAY_MS, "--delay-ms", min=0, help="Base delay between progress steps"),
    steps: int = typer.Option(DEFAULT_STEPS, "--steps", min=1, help="Progress steps per download"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for download speeds"),
) -> None:
    """Simulate concurrent downloads, each redrawing its own line."""
    prev_sigterm = signal.signal(signal.SIGTERM, _raise_system_exit)
    try:
        asyncio.run(run_demo(count or get_demo_count(), delay_ms=delay_ms, seed=seed, steps=steps))
    except IntermError as exc:
        err_console.print(f"Error: {exc}")
        raise typer.Exit(1)
    finally:
        signal.signal(signal.SIGTERM, prev_sigterm)

    console.print("[cyan]All downloads complete![/cyan]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
