"""Configuration shared by the template resolver, copier and CLI."""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "BUNDLED_TEMPLATES_ROOT",
    "DEFAULT_IGNORE",
    "DEFAULT_TEMPLATES",
    "GeneratorConfig",
    "TEMPLATES_ROOT_ENV",
    "TemplateChoice",
]


BUNDLED_TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"
TEMPLATES_ROOT_ENV = "CREATE_NHUT9DEV_APP_TEMPLATES"

PLACEHOLDER = "{{projectName}}"
DEFAULT_PROJECT_NAME = "nhut9dev-app"

DEFAULT_IGNORE: FrozenSet[str] = frozenset(
    {
        ".DS_Store",
        "node_modules",
        "dist",
        "out",
        ".git",
        "test-results",
        "jest-results",
        ".swc",
        ".next",
    }
)

DEFAULT_SUBSTITUTION_TARGETS: Tuple[str, ...] = (
    "package.json",
    "README.md",
    ".env.example",
    "apps/mobile/app.json",
)

DEFAULT_RENAMES: Tuple[Tuple[str, str], ...] = (("gitignore", ".gitignore"),)


class TemplateChoice(BaseModel):
    """A bundled starter project addressed by ``key``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1, description="Directory name of the template.")
    label: str = Field(..., min_length=1, description="Human readable name shown in the prompt.")


DEFAULT_TEMPLATES: Tuple[TemplateChoice, ...] = (
    TemplateChoice(key="nextjs", label="Next.js"),
    TemplateChoice(key="nextjs16-clean-architecture", label="Next.js 16 (Clean Architecture)"),
    TemplateChoice(key="clean-architecture-express", label="Express (Clean Architecture)"),
    TemplateChoice(key="api-gateway", label="API Gateway (Express)"),
    TemplateChoice(key="turbo-nextjs-expo", label="Turborepo (Next.js + Expo)"),
)


class GeneratorConfig(BaseModel):
    """Immutable settings driving a single generator run.

    Attributes
    ----------
    templates_root:
        Directory holding one sub-directory per template key.
    templates:
        Templates offered by the interactive prompt, in display order.
    ignore:
        Base names skipped at every level of the copied tree.
    placeholder:
        Literal token replaced by the project name.
    substitution_targets:
        Paths, relative to the destination, in which the placeholder is
        replaced. Missing files are skipped.
    renames:
        ``(stored, final)`` name pairs for files kept under a neutral name in
        the templates and renamed at the destination root after copying.
    default_project_name:
        Value proposed by the project name prompt.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    templates_root: Path = Field(default=BUNDLED_TEMPLATES_ROOT)
    templates: Tuple[TemplateChoice, ...] = Field(default=DEFAULT_TEMPLATES)
    ignore: FrozenSet[str] = Field(default=DEFAULT_IGNORE)
    placeholder: str = Field(default=PLACEHOLDER, min_length=1)
    substitution_targets: Tuple[str, ...] = Field(default=DEFAULT_SUBSTITUTION_TARGETS)
    renames: Tuple[Tuple[str, str], ...] = Field(default=DEFAULT_RENAMES)
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)

    @field_validator("templates")
    @classmethod
    def _unique_keys(cls, value: Tuple[TemplateChoice, ...]) -> Tuple[TemplateChoice, ...]:
        keys = [template.key for template in value]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"duplicate template keys: {', '.join(duplicates)}")
        return value

    @classmethod
    def default(cls) -> "GeneratorConfig":
        """Return the configuration for the templates bundled with the package."""

        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """Build the default configuration, honouring environment overrides.

        ``CREATE_NHUT9DEV_APP_TEMPLATES`` points the generator at another
        templates root, which is handy when developing templates locally.
        """

        environ = os.environ if environ is None else environ
        override = environ.get(TEMPLATES_ROOT_ENV, "").strip()
        if not override:
            return cls.default()
        return cls(templates_root=Path(override).expanduser())

    def template_keys(self) -> Tuple[str, ...]:
        return tuple(template.key for template in self.templates)

    def get_template(self, key: str) -> Optional[TemplateChoice]:
        """Return the :class:`TemplateChoice` registered under ``key``, if any."""

        for template in self.templates:
            if template.key == key:
                return template
        return None
