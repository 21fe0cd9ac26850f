"""Exceptions raised by the scaffolding engine.

Every failure of a generation run surfaces as a ``GenerationError`` subclass.
The orchestrator attaches the allocated root directory (when there is one) so
callers can apply their own cleanup policy; the underlying cause is chained
via ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Raised when a generation run fails irrecoverably."""

    def __init__(self, message: str, root: Path | None = None) -> None:
        self.root = root
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.root is not None:
            return f"{message} (root: {self.root})"
        return message


class WorkspaceError(GenerationError):
    """The scratch area or the run root could not be allocated."""


class RenderError(GenerationError):
    """A template could not be rendered or a resource could not be read."""


class FileSystemError(GenerationError):
    """A directory or file under the run root could not be created."""
