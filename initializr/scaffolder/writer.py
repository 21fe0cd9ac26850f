"""File-system writes for a single generation run.

``ProjectWriter`` is the only component that touches disk below a run root.
It refuses any path that resolves outside the root, translates ``OSError``
into ``FileSystemError``, and announces every created path to its listeners
(the temporary-file registry subscribes this way).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from ..utils import is_within, make_executable
from .errors import FileSystemError

# (group, path) -> None
PathListener = Callable[[str, Path], None]


class ProjectWriter:
    """Writes files and directories beneath one run root."""

    def __init__(self, root: Path, listeners: Iterable[PathListener] = ()) -> None:
        self.root = Path(root)
        self.group = self.root.name
        self.listeners: list[PathListener] = list(listeners)

    # -- Public API --------------------------------------------------------

    def mkdirs(self, path: Path) -> Path:
        """Create *path* and any missing parents."""
        self._check(path)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(f"Cannot create directory {path}") from exc
        self._emit(path)
        return path

    def write_text(self, target: Path, body: str, *, executable: bool = False) -> Path:
        """Write *body* as UTF-8 to *target*."""
        return self._write(target, body.encode("utf-8"), executable)

    def write_binary(self, target: Path, body: bytes, *, executable: bool = False) -> Path:
        return self._write(target, body, executable)

    # -- Internals ---------------------------------------------------------

    def _write(self, target: Path, data: bytes, executable: bool) -> Path:
        self._check(target)
        try:
            # newline translation must not touch rendered content
            with open(target, "wb") as stream:
                stream.write(data)
            if executable:
                make_executable(target)
        except OSError as exc:
            raise FileSystemError(f"Cannot write file {target}") from exc
        self._emit(target)
        return target

    def _check(self, path: Path) -> None:
        if not is_within(path, self.root):
            raise FileSystemError(f"Refusing to write outside of {self.root}: {path}")

    def _emit(self, path: Path) -> None:
        for listener in self.listeners:
            listener(self.group, path)
