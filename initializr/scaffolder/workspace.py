"""Temporary workspace management for generation runs.

Every run gets a private, freshly created root directory under a shared
scratch area.  The scratch area itself is created lazily, once per
``ScratchArea`` instance, and is safe to initialise from concurrent runs.

Bookkeeping of what was created lives in ``TemporaryFileRegistry``, which
only ever learns about paths through listener callbacks.  Generation logic
never reads it; it exists so that callers can clean up roots later.
"""

from __future__ import annotations

import shutil
import tempfile
import threading
from collections.abc import Iterable
from pathlib import Path

from rich.markup import escape

from ..utils import console, print_warning
from .errors import WorkspaceError
from .writer import PathListener


class ScratchArea:
    """Lazily created, process-shared scratch directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._ready = False

    def get(self) -> Path:
        """Return the scratch directory, creating it on first use.

        Raises:
            WorkspaceError: If the directory cannot be created.
        """
        if self._ready:
            return self.path
        with self._lock:
            if not self._ready:
                try:
                    self.path.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise WorkspaceError(f"Cannot create scratch directory {self.path}") from exc
                self._ready = True
        return self.path


class TemporaryFileRegistry:
    """Ordered record of created paths, grouped by run root name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[str, list[Path]] = {}

    def record(self, group: str, path: Path) -> None:
        with self._lock:
            self._files.setdefault(group, []).append(Path(path))

    def files(self, group: str) -> list[Path]:
        with self._lock:
            return list(self._files.get(group, []))

    def groups(self) -> list[str]:
        with self._lock:
            return list(self._files)

    def cleanup(self, group: str) -> None:
        """Delete everything recorded under *group* and forget it."""
        with self._lock:
            paths = self._files.pop(group, [])
        if not paths:
            print_warning(f"No temporary files recorded for {group}")
            return
        # Children were recorded after their parents.
        for path in reversed(paths):
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            elif path.exists():
                path.unlink(missing_ok=True)

    def cleanup_all(self) -> None:
        for group in self.groups():
            self.cleanup(group)


class WorkspaceManager:
    """Allocates run roots and announces them to path listeners."""

    def __init__(
        self,
        scratch: ScratchArea,
        listeners: Iterable[PathListener] = (),
    ) -> None:
        self.scratch = scratch
        self.listeners: list[PathListener] = list(listeners)

    def allocate_root(self) -> Path:
        """Create a uniquely named, empty directory for one run.

        The new directory is registered under a group named after itself
        before it is returned.

        Raises:
            WorkspaceError: If the scratch area or the directory cannot be
                created.
        """
        scratch = self.scratch.get()
        try:
            root = Path(tempfile.mkdtemp(prefix="tmp", dir=scratch))
        except OSError as exc:
            raise WorkspaceError(f"Cannot create temp dir under {scratch}") from exc
        for listener in self.listeners:
            listener(root.name, root)
        console.print(f"[cyan]Allocated workspace[/cyan] [bold]{escape(str(root))}[/bold]")
        return root
