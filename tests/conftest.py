"""Shared pytest fixtures for the Initializr test suite.

Provides reusable fixtures for:
- A populated on-disk resource store (Gradle 3/4 and Maven wrappers)
- Configuration pointing at per-test scratch and resource directories
- Sample requests and template models
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from initializr.config import InitializrConfig
from initializr.scaffolder.generator import ProjectGenerator
from initializr.scaffolder.models import BuildTool, Dependency, Packaging, ProjectRequest
from initializr.scaffolder.templates import TemplateRenderer
from initializr.scaffolder.writer import ProjectWriter


# ---------------------------------------------------------------------------
# Resource store
# ---------------------------------------------------------------------------

WRAPPER_RESOURCES: dict[str, str] = {
    "gradle3/gradlew": "#!/bin/sh\n# gradle 3 launcher\n",
    "gradle3/gradlew.bat": "@rem gradle 3 launcher\r\n",
    "gradle3/gradle/wrapper/gradle-wrapper.properties": "distributionUrl=gradle-3.5.1-bin.zip\n",
    "gradle4/gradlew": "#!/bin/sh\n# gradle 4 launcher\n",
    "gradle4/gradlew.bat": "@rem gradle 4 launcher\r\n",
    "gradle4/gradle/wrapper/gradle-wrapper.properties": "distributionUrl=gradle-4.10.2-bin.zip\n",
    "maven/mvnw": "#!/bin/sh\n# maven launcher\n",
    "maven/mvnw.cmd": "@REM maven launcher\r\n",
    "maven/wrapper/maven-wrapper.properties": "distributionUrl=apache-maven-3.5.4-bin.zip\n",
}

WRAPPER_JARS: dict[str, bytes] = {
    "gradle3/gradle/wrapper/gradle-wrapper.jar": b"PK\x03\x04gradle3\x00\xff",
    "gradle4/gradle/wrapper/gradle-wrapper.jar": b"PK\x03\x04gradle4\x00\xff",
    "maven/wrapper/maven-wrapper.jar": b"PK\x03\x04maven\x00\xff",
}


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Resource store root laid out as ``<root>/project/<location>``."""
    root = tmp_path / "resources"
    for location, text in WRAPPER_RESOURCES.items():
        path = root / "project" / location
        path.parent.mkdir(parents=True, exist_ok=True)
        # keep CRLF in the .bat/.cmd fixtures byte-exact
        path.write_bytes(text.encode("utf-8"))
    for location, data in WRAPPER_JARS.items():
        path = root / "project" / location
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return root


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def config(scratch_dir: Path, resource_dir: Path) -> InitializrConfig:
    return InitializrConfig(scratch_dir=scratch_dir, resource_dir=resource_dir)


@pytest.fixture
def generator(config: InitializrConfig) -> ProjectGenerator:
    return ProjectGenerator(config)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def run_root(tmp_path: Path) -> Path:
    root = tmp_path / "run"
    root.mkdir()
    return root


@pytest.fixture
def writer(run_root: Path) -> ProjectWriter:
    return ProjectWriter(run_root)


# ---------------------------------------------------------------------------
# Requests & models
# ---------------------------------------------------------------------------

WEB = Dependency(group_id="org.springframework.boot", artifact_id="spring-boot-starter-web")


@pytest.fixture
def demo_request() -> ProjectRequest:
    """Gradle/Java/jar request with the web starter."""
    return ProjectRequest(
        build_tool=BuildTool.GRADLE,
        language="java",
        packaging=Packaging.JAR,
        application_name="Demo",
        package_name="com.example.demo",
        boot_version="2.1.0",
        resolved_dependencies=(WEB,),
        has_web_facet=True,
    )


@pytest.fixture
def maven_request() -> ProjectRequest:
    """Plain Maven/Java/jar request with no dependencies."""
    return ProjectRequest(
        build_tool=BuildTool.MAVEN,
        language="java",
        packaging=Packaging.JAR,
        application_name="DemoApplication",
        package_name="com.example.demo",
        boot_version="2.1.0",
    )


@pytest.fixture
def base_model() -> dict[str, Any]:
    """Template model as handed over by the resolution layer."""
    return {
        "group_id": "com.example",
        "artifact_id": "demo",
        "version": "0.0.1-SNAPSHOT",
        "name": "demo",
        "description": "Demo project for Spring Boot",
        "package_name": "com.example.demo",
        "application_name": "Demo",
        "boot_version": "2.1.0",
        "java_version": "1.8",
        "language": "java",
        "packaging": "jar",
        "dependencies": [
            {"group_id": "org.springframework.boot", "artifact_id": "spring-boot-starter-web"},
        ],
    }


# ---------------------------------------------------------------------------
# Tree inspection
# ---------------------------------------------------------------------------


def _relative_paths(root: Path, want_dirs: bool) -> set[str]:
    return {
        p.relative_to(root).as_posix()
        for p in root.rglob("*")
        if p.is_dir() == want_dirs
    }


@pytest.fixture
def tree_files():
    """Every file below a root as POSIX paths relative to it."""
    return lambda root: _relative_paths(Path(root), want_dirs=False)


@pytest.fixture
def tree_dirs():
    return lambda root: _relative_paths(Path(root), want_dirs=True)
