"""Source tree skeleton generation.

Lays out ``src/main`` and ``src/test`` for the request's language and
package, renders the application, servlet initializer and test class, and
creates the resource directories.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .models import ProjectRequest
from .templates import Renderer, render_template
from .writer import ProjectWriter

LANGUAGE_EXTENSIONS: dict[str, str] = {
    "kotlin": "kt",
}

APPLICATION_PROPERTIES = "application.properties"

WEB_RESOURCE_DIRS: tuple[str, ...] = ("templates", "static")


def file_extension(language: str) -> str:
    """Source file extension for *language* (``kotlin`` -> ``kt``)."""
    return LANGUAGE_EXTENSIONS.get(language, language)


class SourceTreeGenerator:
    """Writes the source/test skeleton of a generated project."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def main_dir(self, request: ProjectRequest, project_dir: Path) -> Path:
        return project_dir / "src" / "main" / request.language / request.package_path

    def test_dir(self, request: ProjectRequest, project_dir: Path) -> Path:
        return project_dir / "src" / "test" / request.language / request.package_path

    def build(
        self,
        request: ProjectRequest,
        model: dict[str, Any],
        project_dir: Path,
        writer: ProjectWriter,
    ) -> Path:
        """Generate sources, tests and resources below *project_dir*.

        *model* must already contain the test-model values.

        Returns:
            The test source directory (the augmenter writes next to it).
        """
        ext = file_extension(request.language)
        name = request.application_name

        src = writer.mkdirs(self.main_dir(request, project_dir))
        self._write(src / f"{name}.{ext}", f"Application.{ext}", model, writer)
        if request.is_war:
            self._write(
                src / f"ServletInitializer.{ext}", f"ServletInitializer.{ext}", model, writer
            )

        test = writer.mkdirs(self.test_dir(request, project_dir))
        self._write(test / f"{name}Tests.{ext}", f"ApplicationTests.{ext}", model, writer)

        resources = writer.mkdirs(project_dir / "src" / "main" / "resources")
        writer.write_text(resources / APPLICATION_PROPERTIES, "")
        if request.has_web_facet:
            for directory in WEB_RESOURCE_DIRS:
                writer.mkdirs(resources / directory)

        return test

    def _write(
        self, target: Path, template_name: str, model: dict[str, Any], writer: ProjectWriter
    ) -> None:
        writer.write_text(target, render_template(self.renderer, template_name, model))
