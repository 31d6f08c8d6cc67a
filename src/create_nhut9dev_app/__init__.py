"""Scaffold new projects from bundled starter templates.

The package copies a template tree into a fresh directory, skipping build and
version control artifacts, restores dotfiles stored under neutral names, and
writes the project name into a few well known files. Everything is usable
programmatically through :class:`ProjectGenerator` and from the command line.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import GeneratorConfig, TemplateChoice
from .copier import copy_template, restore_dotfiles
from .errors import DestinationExistsError, GeneratorError, TemplateNotFoundError
from .placeholders import replace_placeholder, substitute_placeholders
from .resolver import destination_for, ensure_destination_available, resolve_template
from .scaffold import GenerationResult, ProjectGenerator

__all__ = [
    "DestinationExistsError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "ProjectGenerator",
    "TemplateChoice",
    "TemplateNotFoundError",
    "copy_template",
    "destination_for",
    "ensure_destination_available",
    "replace_placeholder",
    "resolve_template",
    "restore_dotfiles",
    "substitute_placeholders",
]
