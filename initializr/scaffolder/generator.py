"""Main scaffolding orchestrator.

Takes a resolved ``ProjectRequest`` plus its template model and materialises
the project below a freshly allocated temporary root:

    allocate root -> build files -> .gitignore -> source tree -> extras

The pipeline is strict: the first failure aborts the run and is re-raised
with the allocated root attached, so the caller can decide what to do with
whatever was already written.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from rich.markup import escape

from ..config import InitializrConfig
from ..utils import console, print_error, print_summary_table
from .augment_gen import DependencyAugmenter
from .build_gen import BuildGenerator
from .errors import GenerationError, WorkspaceError
from .models import ProjectRequest
from .resources import FileSystemResourceStore, ResourceStore
from .source_gen import SourceTreeGenerator
from .templates import Renderer, TemplateRenderer, render_template
from .version import Version
from .workspace import ScratchArea, TemporaryFileRegistry, WorkspaceManager
from .writer import ProjectWriter

GITIGNORE_TEMPLATE = "gitignore"

# Platform versions from here on use SpringBootTest/SpringRunner in tests.
NEW_TEST_INFRASTRUCTURE = Version.parse("1.4.0.RELEASE")


class ProjectGenerator:
    """Generates project trees for resolved requests.

    One instance serves any number of runs, sequentially or from several
    worker threads at once; runs share nothing but the scratch area and the
    temporary-file registry.
    """

    def __init__(
        self,
        config: InitializrConfig | None = None,
        *,
        renderer: Renderer | None = None,
        resources: ResourceStore | None = None,
        registry: TemporaryFileRegistry | None = None,
    ) -> None:
        self.config = config or InitializrConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.resources = resources or FileSystemResourceStore(self.config.project_resource_dir)
        self.registry = registry or TemporaryFileRegistry()
        self.workspace = WorkspaceManager(
            ScratchArea(self.config.scratch_dir), listeners=[self.registry.record]
        )
        self.build_gen = BuildGenerator(
            self.renderer,
            self.resources,
            include_maven_wrapper=self.config.include_maven_wrapper,
        )
        self.source_gen = SourceTreeGenerator(self.renderer)
        self.augmenter = DependencyAugmenter(self.renderer)

    # -- Public API --------------------------------------------------------

    def generate_project(self, request: ProjectRequest, model: dict[str, Any]) -> Path:
        """Generate the complete project structure.

        Args:
            request: The resolved project request.
            model: Template model assembled by the resolution layer.  It is
                copied, never modified.

        Returns:
            The run root directory.  With a ``base_dir`` the project itself
            lives in ``root/base_dir``.

        Raises:
            GenerationError: ``WorkspaceError``, ``RenderError`` or
                ``FileSystemError``, carrying the root when one was allocated.
        """
        console.print(
            f"[cyan]Generating[/cyan] [bold]{escape(request.application_name)}[/bold] "
            f"({request.build_tool.value}, {request.language}, {request.packaging.value})"
        )
        root = self.workspace.allocate_root()
        try:
            self._reset_root(root)
            writer = ProjectWriter(root, listeners=[self.registry.record])
            context = dict(model)

            project_dir = self.build_gen.generate(request, context, writer)
            self._write_gitignore(context, project_dir, writer)

            self.setup_test_model(request, context)
            test_dir = self.source_gen.build(request, context, project_dir, writer)
            self.augmenter.augment(request, context, test_dir, writer)
        except GenerationError as exc:
            if exc.root is None:
                exc.root = root
            print_error(f"Project generation failed: {exc}")
            raise

        print_summary_table(
            {
                "Application": request.application_name,
                "Build tool": request.build_tool.value,
                "Root": str(root),
                "Paths written": str(len(self.registry.files(root.name))),
            },
            title="Project generated",
        )
        return root

    async def agenerate_project(self, request: ProjectRequest, model: dict[str, Any]) -> Path:
        """Run ``generate_project`` on a worker thread.

        There is no cancellation: a cancelled caller stops waiting, but the
        run itself finishes in the background.
        """
        return await asyncio.to_thread(self.generate_project, request, model)

    def cleanup(self, root: Path) -> None:
        """Delete everything created by the run rooted at *root*."""
        self.registry.cleanup(Path(root).name)

    # -- Test model --------------------------------------------------------

    def setup_test_model(self, request: ProjectRequest, model: dict[str, Any]) -> None:
        """Add the values the test-class templates expect.

        Sets ``test_imports`` and ``test_annotations``; older platforms use
        the ``SpringApplicationConfiguration`` based test runner.  A version
        that does not parse counts as older than every known one, as it does
        for the Gradle wrapper.
        """
        language = request.language
        version = Version.safe_parse(request.boot_version)
        if version is not None and version >= NEW_TEST_INFRASTRUCTURE:
            imports = [
                "org.junit.runner.RunWith",
                "org.springframework.boot.test.context.SpringBootTest",
                "org.springframework.test.context.junit4.SpringRunner",
            ]
            annotations = [
                f"@RunWith({_class_literal('SpringRunner', language)})",
                "@SpringBootTest",
            ]
        else:
            imports = [
                "org.junit.runner.RunWith",
                "org.springframework.boot.test.SpringApplicationConfiguration",
                "org.springframework.test.context.junit4.SpringJUnit4ClassRunner",
            ]
            annotations = [
                f"@RunWith({_class_literal('SpringJUnit4ClassRunner', language)})",
                "@SpringApplicationConfiguration(classes = "
                f"{_class_literal(request.application_name, language)})",
            ]
            if request.has_web_facet:
                imports.append("org.springframework.test.context.web.WebAppConfiguration")
                annotations.append("@WebAppConfiguration")

        model["test_imports"] = "".join(
            _import_statement(name, language) + "\n" for name in imports
        )
        model["test_annotations"] = "".join(a + "\n" for a in annotations)

    # -- Steps -------------------------------------------------------------

    @staticmethod
    def _reset_root(root: Path) -> None:
        """Replace the allocated placeholder with a brand new directory."""
        try:
            shutil.rmtree(root)
            root.mkdir(parents=True)
        except OSError as exc:
            raise WorkspaceError(f"Cannot recreate root directory {root}") from exc

    def _write_gitignore(
        self, model: dict[str, Any], project_dir: Path, writer: ProjectWriter
    ) -> None:
        body = render_template(self.renderer, GITIGNORE_TEMPLATE, model)
        writer.write_text(project_dir / ".gitignore", body)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _import_statement(name: str, language: str) -> str:
    end = "" if language in ("groovy", "kotlin") else ";"
    return f"import {name}{end}"


def _class_literal(name: str, language: str) -> str:
    if language == "kotlin":
        return f"{name}::class"
    return f"{name}.class"
