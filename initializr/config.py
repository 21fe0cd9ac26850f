"""Initializr scaffolding configuration.

Typed configuration for the generation engine.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


def _default_scratch_dir() -> Path:
    """``$TMPDIR/initializr``, falling back to ``./initializr``."""
    return Path(os.environ.get("TMPDIR", ".")) / "initializr"


class InitializrConfig(BaseModel):
    """Global configuration for the project generator.

    Instances are typically created once by the hosting service (or by
    ``from_env``) and handed to ``ProjectGenerator``; nothing in the engine
    reads process-wide state on its own.
    """

    scratch_dir: Path = Field(
        default_factory=_default_scratch_dir,
        description="Scratch area under which every generation run gets its own root",
    )
    resource_dir: Path = Field(
        default=Path("resources"),
        description="Root of the external resource store (wrapper scripts and jars)",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Override for the Jinja2 template directory",
    )
    include_maven_wrapper: bool = Field(
        default=False,
        description="Install mvnw and .mvn/wrapper for Maven projects",
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_resource_dir(self) -> Path:
        """Namespace under the resource store holding project resources."""
        return self.resource_dir / "project"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "InitializrConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "InitializrConfig":
        """Build an ``InitializrConfig`` from environment variables.

        Recognised variables (all optional):
            INITIALIZR_SCRATCH_DIR (defaults to ``$TMPDIR/initializr``),
            INITIALIZR_RESOURCE_DIR, INITIALIZR_TEMPLATE_DIR,
            INITIALIZR_MAVEN_WRAPPER (``1``/``true``/``yes`` to enable).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("INITIALIZR_SCRATCH_DIR"):
            kwargs["scratch_dir"] = Path(os.environ["INITIALIZR_SCRATCH_DIR"])
        if os.environ.get("INITIALIZR_RESOURCE_DIR"):
            kwargs["resource_dir"] = Path(os.environ["INITIALIZR_RESOURCE_DIR"])
        if os.environ.get("INITIALIZR_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["INITIALIZR_TEMPLATE_DIR"])
        if os.environ.get("INITIALIZR_MAVEN_WRAPPER"):
            kwargs["include_maven_wrapper"] = (
                os.environ["INITIALIZR_MAVEN_WRAPPER"].strip().lower() in ("1", "true", "yes")
            )
        return cls(**kwargs)
