"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``initializr/scaffolder/templates/`` directory and renders them with the
request's template model.  Template names are logical (``starter-pom.xml``,
``Application.kt``); the ``.j2`` suffix is added here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from ..utils import to_camel_case
from .errors import RenderError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


class Renderer(Protocol):
    def render(self, template_name: str, model: dict[str, Any]) -> str: ...


def render_template(renderer: Renderer, template_name: str, model: dict[str, Any]) -> str:
    """Render through any ``Renderer``, reporting failures as ``RenderError``.

    Third-party renderers fail in their own ways; all of them are fatal to
    the run.
    """
    try:
        return renderer.render(template_name, model)
    except RenderError:
        raise
    except Exception as exc:
        raise RenderError(f"Cannot render template {template_name}: {exc}") from exc


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Missing model keys render as empty strings.  The
    ``camel_case`` filter names Gradle build properties the same way BOM
    version references do.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["camel_case"] = to_camel_case

    def render(self, template_name: str, model: dict[str, Any]) -> str:
        """Render a single template with the provided model.

        Args:
            template_name: Logical template name relative to the template
                directory, without the ``.j2`` suffix (e.g.
                ``"ApplicationTests.java"``).
            model: Dictionary of variables available inside the template.

        Returns:
            The rendered template content.

        Raises:
            RenderError: If the template is missing or fails to render.
        """
        try:
            template = self.env.get_template(template_name + TEMPLATE_SUFFIX)
            return template.render(**model)
        except TemplateError as exc:
            raise RenderError(f"Cannot render template {template_name}: {exc}") from exc

