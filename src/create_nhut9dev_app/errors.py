"""Exception types raised by the project generator."""

from __future__ import annotations

from pathlib import Path


class GeneratorError(RuntimeError):
    """Raised when a project cannot be generated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFoundError(GeneratorError):
    """Raised when the requested template has no bundled directory."""

    def __init__(self, key: str, path: Path | None = None) -> None:
        self.key = key
        self.path = path
        super().__init__(f"Template '{key}' not found.")


class DestinationExistsError(GeneratorError):
    """Raised when the destination directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path.name}' already exists.")


__all__ = ["DestinationExistsError", "GeneratorError", "TemplateNotFoundError"]
