"""Mapping of source paths onto the output tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .errors import PathError, SiteIOError

TEMPLATE_EXTENSION = ".jinja"


def to_output_path(source_root: Path, output_root: Path, input_path: Path) -> Path:
    """Return where ``input_path`` lands under ``output_root``.

    The ``source_root`` prefix is stripped lexically, so symlinks keep the
    location they were found at rather than their resolved target. A trailing
    ``.jinja`` extension is dropped, exposing the underlying one
    (``page.html.jinja`` becomes ``page.html``).
    """
    try:
        rel_path = Path(input_path).relative_to(source_root)
    except ValueError as exc:
        raise PathError(f"{input_path} is not under {source_root}") from exc

    if rel_path.suffix == TEMPLATE_EXTENSION:
        return Path(output_root) / rel_path.parent / rel_path.stem
    return Path(output_root) / rel_path


def ensure_dir(directory: Path) -> None:
    """Create ``directory`` and any missing ancestors."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SiteIOError(f"Could not create directory {directory}: {exc}") from exc


def ensure_parent_dir(path: Path) -> None:
    ensure_dir(path.parent)


def list_dir(directory: Path) -> List[os.DirEntry]:
    """Return the entries of ``directory`` sorted by name."""
    try:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda item: item.name)
    except OSError as exc:
        raise SiteIOError(f"Could not list directory {directory}: {exc}") from exc


__all__ = [
    "TEMPLATE_EXTENSION",
    "ensure_dir",
    "ensure_parent_dir",
    "list_dir",
    "to_output_path",
]
