"""Filtered recursive copy of a template tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from .errors import DestinationExistsError

__all__ = ["copy_template", "ignore_names", "restore_dotfiles"]


LOGGER = logging.getLogger(__name__)


def ignore_names(ignore: Iterable[str]) -> Callable[[str, list[str]], set[str]]:
    """Build a :func:`shutil.copytree` ignore callback matching base names.

    Matching is literal and applied independently in every directory, so an
    excluded name is skipped at any depth of the tree.
    """

    excluded = frozenset(ignore)

    def _ignore(directory: str, names: list[str]) -> set[str]:
        skipped = {name for name in names if name in excluded}
        if skipped:
            LOGGER.debug("skipping %s in %s", sorted(skipped), directory)
        return skipped

    return _ignore


def copy_template(source: str | Path, destination: str | Path, ignore: Iterable[str] = ()) -> Path:
    """Copy ``source`` into a freshly created ``destination``.

    The destination directory is created exclusively; if it appears between an
    earlier existence check and this call :class:`DestinationExistsError` is
    raised and nothing is copied. Any other ``OSError`` propagates and leaves
    the partially copied tree in place.
    """

    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        raise FileNotFoundError(source)

    try:
        destination.mkdir(parents=True, exist_ok=False)
    except FileExistsError as exc:
        raise DestinationExistsError(destination) from exc

    LOGGER.debug("copying %s to %s", source, destination)
    shutil.copytree(
        source,
        destination,
        symlinks=True,
        ignore=ignore_names(ignore),
        dirs_exist_ok=True,
    )
    return destination


def restore_dotfiles(destination: str | Path, renames: Iterable[tuple[str, str]]) -> list[Path]:
    """Rename neutral file names at the root of ``destination``.

    Templates keep files such as ``gitignore`` without the leading dot so that
    packaging tools do not drop them. Names absent from the copy are ignored,
    and a file that already exists under the final name is never overwritten.
    """

    destination = Path(destination)
    renamed: list[Path] = []
    for stored_name, final_name in renames:
        stored = destination / stored_name
        if not stored.exists():
            continue
        target = destination / final_name
        if target.exists() or target.is_symlink():
            LOGGER.warning("not renaming %s: %s already exists", stored, target)
            continue
        stored.rename(target)
        LOGGER.debug("renamed %s to %s", stored, target)
        renamed.append(target)
    return renamed
