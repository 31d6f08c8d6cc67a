"""Literal placeholder substitution in generated files.

Replacement is a plain substring replace, not a template language: any text
identical to the token is rewritten, including occurrences that were not meant
as placeholders.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

__all__ = ["replace_placeholder", "substitute_placeholders"]


LOGGER = logging.getLogger(__name__)


def replace_placeholder(
    path: str | Path,
    token: str,
    value: str,
    *,
    encoding: str = "utf-8",
) -> bool:
    """Replace every ``token`` in ``path`` with ``value``.

    Returns ``False`` without touching the filesystem when ``path`` is not a
    file, ``True`` otherwise.
    """

    if not token:
        raise ValueError("token must not be empty")

    path = Path(path)
    if not path.is_file():
        return False

    text = path.read_text(encoding=encoding)
    count = text.count(token)
    if count:
        path.write_text(text.replace(token, value), encoding=encoding)
    LOGGER.debug("replaced %d occurrence(s) of %r in %s", count, token, path)
    return True


def substitute_placeholders(
    destination: str | Path,
    targets: Iterable[str],
    token: str,
    value: str,
) -> list[Path]:
    """Apply :func:`replace_placeholder` to each relative path in ``targets``.

    Returns the files that were present and processed.
    """

    destination = Path(destination)
    processed: list[Path] = []
    for relative in targets:
        candidate = destination / relative
        if replace_placeholder(candidate, token, value):
            processed.append(candidate)
    return processed
