"""Read-only resource store for wrapper scripts and jars.

The engine only needs ``ResourceStore``; ``FileSystemResourceStore`` is the
implementation used by default and resolves logical paths such as
``gradle4/gradlew`` below ``<resource_dir>/project/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..utils import is_within
from .errors import RenderError


class ResourceStore(Protocol):
    def get_text_resource(self, location: str) -> str: ...

    def get_binary_resource(self, location: str) -> bytes: ...


class FileSystemResourceStore:
    """Serves resources from a directory tree."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def get_text_resource(self, location: str) -> str:
        path = self._resolve(location)
        try:
            # decoded by hand so CRLF launcher scripts stay byte-exact
            return path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RenderError(f"Cannot read text resource {location}") from exc

    def get_binary_resource(self, location: str) -> bytes:
        path = self._resolve(location)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise RenderError(f"Cannot read binary resource {location}") from exc

    def _resolve(self, location: str) -> Path:
        path = self.root / location
        if not is_within(path, self.root):
            raise RenderError(f"Resource location escapes the store: {location}")
        if not path.is_file():
            raise RenderError(f"Resource not found: {location} (in {self.root})")
        return path


def read_text_resource(store: ResourceStore, location: str) -> str:
    """Fetch a text resource from any store; every failure is a ``RenderError``."""
    try:
        return store.get_text_resource(location)
    except RenderError:
        raise
    except Exception as exc:
        raise RenderError(f"Cannot read text resource {location}: {exc}") from exc


def read_binary_resource(store: ResourceStore, location: str) -> bytes:
    try:
        return store.get_binary_resource(location)
    except RenderError:
        raise
    except Exception as exc:
        raise RenderError(f"Cannot read binary resource {location}: {exc}") from exc
