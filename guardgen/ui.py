"""User-facing messages rendered with Rich."""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
