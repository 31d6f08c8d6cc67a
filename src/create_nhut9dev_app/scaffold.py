"""Project generation: resolve, guard, copy, rename and substitute."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorConfig
from .copier import copy_template, restore_dotfiles
from .placeholders import substitute_placeholders
from .resolver import destination_for, ensure_destination_available, resolve_template

__all__ = ["GenerationResult", "ProjectGenerator", "normalize_project_name"]


LOGGER = logging.getLogger(__name__)


def normalize_project_name(name: str) -> str:
    """Strip surrounding whitespace, rejecting names that end up empty."""

    normalized = name.strip()
    if not normalized:
        raise ValueError("project name must not be empty")
    return normalized


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of a successful :meth:`ProjectGenerator.generate` call."""

    project_name: str
    template: str
    destination: Path
    renamed: tuple[Path, ...] = ()
    substituted: tuple[Path, ...] = ()


@dataclass(slots=True)
class ProjectGenerator:
    """Create new projects from the templates described by ``config``."""

    config: GeneratorConfig = field(default_factory=GeneratorConfig.default)

    def generate(
        self,
        project_name: str,
        template: str,
        parent: str | Path | None = None,
    ) -> GenerationResult:
        """Generate ``project_name`` from ``template`` inside ``parent``.

        ``parent`` defaults to the current working directory. Template and
        destination problems are reported before the filesystem is modified;
        errors raised while copying leave whatever was already written.
        """

        project_name = normalize_project_name(project_name)
        template = template.strip()
        template_dir = resolve_template(self.config, template)
        destination = destination_for(project_name, parent)
        ensure_destination_available(destination)

        LOGGER.info("creating %s from template %r", destination, template)
        copy_template(template_dir, destination, self.config.ignore)
        renamed = restore_dotfiles(destination, self.config.renames)
        substituted = substitute_placeholders(
            destination,
            self.config.substitution_targets,
            self.config.placeholder,
            project_name,
        )

        return GenerationResult(
            project_name=project_name,
            template=template,
            destination=destination,
            renamed=tuple(renamed),
            substituted=tuple(substituted),
        )
