"""Pydantic models describing a project generation request.

A ``ProjectRequest`` is produced by the resolution layer (which validates the
dependency graph and version compatibility) and is read-only to the engine.
Values that later become filesystem paths are validated here so a request can
never point the generator outside its run root.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .bom import BillOfMaterials

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_LANGUAGE_RE = re.compile(r"^[a-z][a-z0-9]*$")


class BuildTool(str, Enum):
    """Build-tool ecosystem targeted by the generated project."""

    MAVEN = "maven"
    GRADLE = "gradle"


class Packaging(str, Enum):
    JAR = "jar"
    WAR = "war"


class Dependency(BaseModel):
    """A resolved dependency, identified by group and artifact id."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None
    scope: str = "compile"


class ProjectRequest(BaseModel):
    """Immutable description of the project to generate."""

    model_config = ConfigDict(frozen=True)

    build_tool: BuildTool = Field(default=BuildTool.MAVEN)
    language: str = Field(default="java", description="Source language, e.g. java, kotlin, groovy")
    packaging: Packaging = Field(default=Packaging.JAR)
    application_name: str = Field(default="DemoApplication")
    package_name: str = Field(default="com.example.demo", description="Dotted base package")
    base_dir: str | None = Field(default=None, description="Optional sub-directory of the root")
    boot_version: str = Field(default="2.1.0", description="Target platform version")
    resolved_dependencies: tuple[Dependency, ...] = Field(default_factory=tuple)
    has_web_facet: bool = Field(default=False)
    boms: tuple[BillOfMaterials, ...] = Field(default_factory=tuple)

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if not _LANGUAGE_RE.match(value):
            raise ValueError(f"Invalid language identifier: {value!r}")
        return value

    @field_validator("application_name")
    @classmethod
    def _check_application_name(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Invalid application name: {value!r}")
        return value

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str) -> str:
        segments = value.split(".")
        for segment in segments:
            if not _IDENTIFIER_RE.match(segment):
                raise ValueError(f"Invalid package segment {segment!r} in {value!r}")
        return value

    @field_validator("base_dir")
    @classmethod
    def _check_base_dir(cls, value: str | None) -> str | None:
        if value is None:
            return None
        path = PurePosixPath(value.replace("\\", "/"))
        if not value.strip() or ":" in value or path.is_absolute() or ".." in path.parts:
            raise ValueError(f"base_dir must be a relative path inside the project: {value!r}")
        return value

    # -- Derived values ----------------------------------------------------

    @property
    def is_gradle(self) -> bool:
        return self.build_tool is BuildTool.GRADLE

    @property
    def is_war(self) -> bool:
        return self.packaging is Packaging.WAR

    @property
    def package_path(self) -> PurePosixPath:
        """``com.example.demo`` as ``com/example/demo``."""
        return PurePosixPath(*self.package_name.split("."))

    def has_dependency(self, artifact_id: str) -> bool:
        return any(d.artifact_id == artifact_id for d in self.resolved_dependencies)
