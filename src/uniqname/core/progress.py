"""Terminal feedback for CLI commands.

Everything goes to stderr through one shared rich console, so stdout stays
clean for ``--json`` output. Progress bars only appear on a TTY for long
runs; elsewhere the wrapped iterable is passed through unchanged.

Usage::

    from uniqname.core.progress import progress, status

    for type_ in progress(types, desc="Resolving"):
        index.add_type(type_)

    status("2 types, 5 symbols", style="success")  # ✓ 2 types, 5 symbols
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TypeVar

import structlog
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

log = structlog.get_logger(__name__)

T = TypeVar("T")

# Items below this count never get a bar
_PROGRESS_THRESHOLD = 100

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def get_console() -> Console:
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print one styled line; unknown styles print the bare message."""
    _console.print(" " * indent + _STYLES.get(style, "") + message, highlight=False)
    log.debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """``pluralize(1, "type")`` -> ``"1 type"``; ``pluralize(3, "type")`` -> ``"3 types"``."""
    return f"{count} {singular if count == 1 else (plural or singular + 's')}"


def progress(
    iterable: Iterable[T],
    *,
    desc: str | None = None,
    total: int | None = None,
    unit: str = "types",
    force: bool = False,
) -> Iterator[T]:
    """Yield from ``iterable``, drawing a bar on a TTY for long (or ``force``d) runs."""
    if total is None and hasattr(iterable, "__len__"):
        total = len(iterable)  # type: ignore[arg-type]

    if not (_is_tty() and total is not None and (force or total > _PROGRESS_THRESHOLD)):
        yield from iterable
        return

    columns = (
        TextColumn("    {task.description}:"),
        BarColumn(bar_width=25, style="cyan", complete_style="cyan"),
        TaskProgressColumn(),
        TextColumn("{task.completed}/{task.total} {task.fields[unit]}"),
    )
    with Progress(*columns, console=_console, transient=True) as bar:
        task_id = bar.add_task(desc or "Working", total=total, unit=unit)
        for item in iterable:
            yield item
            bar.advance(task_id)
    log.debug("progress_done", desc=desc, total=total)
