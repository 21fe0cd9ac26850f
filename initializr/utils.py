"""Shared utility functions for the Initializr scaffolding engine.

Provides Rich-based console reporting and a couple of small file-system
helpers used by the scaffolder components.
"""

from __future__ import annotations

import re
import stat
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def to_camel_case(value: str) -> str:
    """Convert ``spring-cloud.version`` (or ``_``/space separated) to ``springCloudVersion``.

    The first word is kept as is; later words get an upper-case initial.
    """
    parts = [p for p in re.split(r"[-_.\s]+", value) if p]
    if not parts:
        return ""
    return parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` if *path* resolves to *root* or somewhere below it."""
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Values are printed literally, never interpreted as Rich markup.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
