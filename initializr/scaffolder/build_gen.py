"""Build descriptor and wrapper generation.

Writes the toolchain-specific files of a project: ``pom.xml`` for Maven, or
``build.gradle`` + ``settings.gradle`` + the Gradle wrapper for Gradle.  The
toolchain is looked up once per run; each handler knows its own templates and
wrapper layout.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .bom import to_bom_model
from .models import BuildTool, ProjectRequest
from .resources import ResourceStore, read_binary_resource, read_text_resource
from .templates import Renderer, render_template
from .version import Version
from .writer import ProjectWriter


# ---------------------------------------------------------------------------
# Wrapper bundles
# ---------------------------------------------------------------------------


class WrapperBundle(str, Enum):
    """Gradle wrapper variant, named after its resource prefix."""

    LEGACY = "gradle3"
    MODERN = "gradle4"


GRADLE_WRAPPER_THRESHOLD = Version.parse("2.0.0.RELEASE")


def select_gradle_wrapper(boot_version: str | None) -> WrapperBundle:
    """Pick the Gradle wrapper bundle for a platform version.

    Versions at or above ``2.0.0`` get the modern bundle.  Anything older,
    and anything that does not parse, gets the legacy one.
    """
    version = Version.safe_parse(boot_version)
    if version is not None and version >= GRADLE_WRAPPER_THRESHOLD:
        return WrapperBundle.MODERN
    return WrapperBundle.LEGACY


@dataclass(frozen=True)
class WrapperLayout:
    """Where a wrapper's resources live and where they are installed.

    ``scripts`` are written at the project root, the properties file and the
    jar below ``wrapper_dir``.
    """

    scripts: tuple[str, ...]
    executable: str
    wrapper_dir: str
    properties: str
    jar: str
    resource_wrapper_dir: str


GRADLE_WRAPPER = WrapperLayout(
    scripts=("gradlew.bat", "gradlew"),
    executable="gradlew",
    wrapper_dir="gradle/wrapper",
    properties="gradle-wrapper.properties",
    jar="gradle-wrapper.jar",
    resource_wrapper_dir="gradle/wrapper",
)

MAVEN_RESOURCE_PREFIX = "maven"

MAVEN_WRAPPER = WrapperLayout(
    scripts=("mvnw.cmd", "mvnw"),
    executable="mvnw",
    wrapper_dir=".mvn/wrapper",
    properties="maven-wrapper.properties",
    jar="maven-wrapper.jar",
    resource_wrapper_dir="wrapper",
)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class BuildGenerator:
    """Generates build descriptors and wrapper bundles."""

    # Template name -> output file name
    MAVEN_FILES: dict[str, str] = {
        "starter-pom.xml": "pom.xml",
    }
    GRADLE_FILES: dict[str, str] = {
        "starter-build.gradle": "build.gradle",
        "starter-settings.gradle": "settings.gradle",
    }

    def __init__(
        self,
        renderer: Renderer,
        resources: ResourceStore,
        *,
        include_maven_wrapper: bool = False,
    ) -> None:
        self.renderer = renderer
        self.resources = resources
        self.include_maven_wrapper = include_maven_wrapper
        self._handlers: dict[BuildTool, Callable[..., None]] = {
            BuildTool.MAVEN: self._generate_maven,
            BuildTool.GRADLE: self._generate_gradle,
        }

    def generate(
        self,
        request: ProjectRequest,
        model: dict[str, Any],
        writer: ProjectWriter,
    ) -> Path:
        """Write the build files for *request* and return the project dir.

        The project directory is the run root, or ``root/base_dir`` when the
        request names one (created if missing).
        """
        project_dir = self.project_dir(request, writer)
        handler = self._handlers[request.build_tool]
        handler(request, self._build_model(request, model), project_dir, writer)
        return project_dir

    @staticmethod
    def project_dir(request: ProjectRequest, writer: ProjectWriter) -> Path:
        if request.base_dir is None:
            return writer.root
        return writer.mkdirs(writer.root / request.base_dir)

    # -- Toolchains --------------------------------------------------------

    def _generate_maven(
        self,
        request: ProjectRequest,
        model: dict[str, Any],
        project_dir: Path,
        writer: ProjectWriter,
    ) -> None:
        self._render_files(self.MAVEN_FILES, model, project_dir, writer)
        if self.include_maven_wrapper:
            self._write_wrapper(MAVEN_WRAPPER, MAVEN_RESOURCE_PREFIX, project_dir, writer)

    def _generate_gradle(
        self,
        request: ProjectRequest,
        model: dict[str, Any],
        project_dir: Path,
        writer: ProjectWriter,
    ) -> None:
        self._render_files(self.GRADLE_FILES, model, project_dir, writer)
        bundle = select_gradle_wrapper(request.boot_version)
        self._write_wrapper(GRADLE_WRAPPER, bundle.value, project_dir, writer)

    # -- Helpers -----------------------------------------------------------

    def _build_model(self, request: ProjectRequest, model: dict[str, Any]) -> dict[str, Any]:
        if "boms" in model or not request.boms:
            return model
        return {**model, "boms": [to_bom_model(request, bom) for bom in request.boms]}

    def _render_files(
        self,
        files: dict[str, str],
        model: dict[str, Any],
        project_dir: Path,
        writer: ProjectWriter,
    ) -> None:
        for template_name, output_name in files.items():
            body = render_template(self.renderer, template_name, model)
            writer.write_text(project_dir / output_name, body)

    def _write_wrapper(
        self,
        layout: WrapperLayout,
        prefix: str,
        project_dir: Path,
        writer: ProjectWriter,
    ) -> None:
        for script in layout.scripts:
            body = read_text_resource(self.resources, f"{prefix}/{script}")
            writer.write_text(
                project_dir / script, body, executable=script == layout.executable
            )

        wrapper_dir = writer.mkdirs(project_dir / layout.wrapper_dir)
        resource_dir = f"{prefix}/{layout.resource_wrapper_dir}"
        properties = read_text_resource(self.resources, f"{resource_dir}/{layout.properties}")
        writer.write_text(wrapper_dir / layout.properties, properties)
        jar = read_binary_resource(self.resources, f"{resource_dir}/{layout.jar}")
        writer.write_binary(wrapper_dir / layout.jar, jar)
