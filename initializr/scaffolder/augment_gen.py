"""Dependency-triggered extra files.

Each ``AugmentRule`` says: when a resolved dependency with this artifact id
is present, render one more test file next to the generated test class.
Rules are evaluated in order and fire at most once per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import ProjectRequest
from .source_gen import file_extension
from .templates import Renderer, render_template
from .writer import ProjectWriter


@dataclass(frozen=True)
class AugmentRule:
    """Extra test file ``<ApplicationName><file_suffix>.<ext>``."""

    artifact_id: str
    file_suffix: str
    template: str

    def template_name(self, ext: str) -> str:
        return f"{self.template}.{ext}"

    def file_name(self, application_name: str, ext: str) -> str:
        return f"{application_name}{self.file_suffix}.{ext}"


AUGMENT_RULES: tuple[AugmentRule, ...] = (
    AugmentRule(
        artifact_id="spring-boot-starter-web",
        file_suffix="MyTests",
        template="ApplicationTests",
    ),
)


class DependencyAugmenter:
    """Renders the extra files requested by matching dependencies."""

    def __init__(
        self,
        renderer: Renderer,
        rules: tuple[AugmentRule, ...] = AUGMENT_RULES,
    ) -> None:
        self.renderer = renderer
        self.rules = rules

    def matching_rules(self, request: ProjectRequest) -> list[AugmentRule]:
        """Rules triggered by the request's dependencies, in rule order."""
        return [rule for rule in self.rules if request.has_dependency(rule.artifact_id)]

    def augment(
        self,
        request: ProjectRequest,
        model: dict[str, Any],
        test_dir: Path,
        writer: ProjectWriter,
    ) -> list[Path]:
        """Write the extra files into the existing *test_dir*."""
        ext = file_extension(request.language)
        written: list[Path] = []
        for rule in self.matching_rules(request):
            body = render_template(self.renderer, rule.template_name(ext), model)
            target = test_dir / rule.file_name(request.application_name, ext)
            written.append(writer.write_text(target, body))
        return written
