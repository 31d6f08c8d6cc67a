"""Locate templates and guard destinations before anything is written."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import GeneratorConfig
from .errors import DestinationExistsError, TemplateNotFoundError

__all__ = ["destination_for", "ensure_destination_available", "resolve_template"]


LOGGER = logging.getLogger(__name__)


def resolve_template(config: GeneratorConfig, key: str) -> Path:
    """Return the absolute directory of template ``key``.

    The key does not have to be listed in ``config.templates``; any
    sub-directory of the templates root is accepted, mirroring the free text
    ``--template`` flag. Keys that would escape the root are rejected.
    """

    key = key.strip()
    root = Path(config.templates_root).expanduser().resolve()
    if not key or Path(key).name != key or key in {".", ".."}:
        raise TemplateNotFoundError(key)

    template_dir = root / key
    if not template_dir.is_dir():
        LOGGER.debug("template %r missing at %s", key, template_dir)
        raise TemplateNotFoundError(key, template_dir)

    LOGGER.debug("resolved template %r to %s", key, template_dir)
    return template_dir


def destination_for(project_name: str, parent: str | Path | None = None) -> Path:
    """Return the directory a project called ``project_name`` is created in."""

    base = Path.cwd() if parent is None else Path(parent).expanduser()
    return (base / project_name).resolve()


def ensure_destination_available(destination: str | Path) -> None:
    """Raise :class:`DestinationExistsError` when ``destination`` exists."""

    destination = Path(destination)
    if destination.exists() or destination.is_symlink():
        raise DestinationExistsError(destination)
