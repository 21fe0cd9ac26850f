"""Initializr scaffolder -- materialises resolved project requests on disk.

This module takes a validated ``ProjectRequest`` and its template model and
renders a complete, buildable Maven or Gradle project (build descriptor,
wrapper, sources, tests, resources) below a fresh temporary directory.

Quick usage::

    from initializr.config import InitializrConfig
    from initializr.scaffolder import ProjectGenerator, ProjectRequest

    request = ProjectRequest(
        build_tool="gradle",
        application_name="Demo",
        package_name="com.example.demo",
        boot_version="2.1.0",
    )
    generator = ProjectGenerator(InitializrConfig.from_env())
    root = generator.generate_project(request, {"group_id": "com.example"})
"""

from initializr.scaffolder.errors import (
    FileSystemError,
    GenerationError,
    RenderError,
    WorkspaceError,
)
from initializr.scaffolder.generator import ProjectGenerator
from initializr.scaffolder.models import BuildTool, Dependency, Packaging, ProjectRequest
from initializr.scaffolder.templates import TemplateRenderer

__all__ = [
    "BuildTool",
    "Dependency",
    "FileSystemError",
    "GenerationError",
    "Packaging",
    "ProjectGenerator",
    "ProjectRequest",
    "RenderError",
    "TemplateRenderer",
    "WorkspaceError",
]
