"""Writing classified entries into the output tree."""

from __future__ import annotations

import shutil
from pathlib import Path

from jinja2 import Environment

from .errors import SiteIOError
from .logging import get_logger
from .models import EntryKind, InputEntry
from .paths import ensure_dir, ensure_parent_dir, list_dir, to_output_path
from .templates import load_template, render_template


class Materializer:
    """Renders pages and copies files or directories under the output root."""

    def __init__(self, source_root: Path, output_root: Path, env: Environment) -> None:
        self.source_root = Path(source_root)
        self.output_root = Path(output_root)
        self.env = env
        self.logger = get_logger("materializer")

    def materialize(self, entry: InputEntry) -> Path:
        """Apply the action matching ``entry.kind`` and return its destination."""
        if entry.kind is EntryKind.PAGE:
            return self.render_page(entry.path)
        if entry.kind is EntryKind.FILE:
            return self.copy_file(entry.path)
        return self.copy_dir(entry.path)

    def render_page(self, path: Path) -> Path:
        destination = self._destination(path)
        template_name = Path(path).relative_to(self.source_root).as_posix()
        template = load_template(self.env, template_name)
        try:
            with destination.open("wb") as handle:
                render_template(template, handle)
        except OSError as exc:
            raise SiteIOError(f"Could not write {destination}: {exc}") from exc
        self.logger.info("Rendered template to file: %s", destination)
        return destination

    def copy_file(self, path: Path) -> Path:
        destination = self._destination(path)
        _copy_bytes(Path(path), destination)
        self.logger.info("Copied file: %s", destination)
        return destination

    def copy_dir(self, path: Path) -> Path:
        """Mirror the whole subtree at ``path`` without skip rules or rendering."""
        destination = self._destination(path)
        self._mirror(Path(path), destination)
        self.logger.info("Copied dir recursively: %s", destination)
        return destination

    def _destination(self, path: Path) -> Path:
        destination = to_output_path(self.source_root, self.output_root, path)
        ensure_parent_dir(destination)
        return destination

    def _mirror(self, source: Path, destination: Path) -> None:
        ensure_dir(destination)
        for dir_entry in list_dir(source):
            nested_source = source / dir_entry.name
            nested_destination = destination / dir_entry.name
            try:
                is_dir = dir_entry.is_dir()
            except OSError as exc:
                raise SiteIOError(f"Could not read type of {nested_source}: {exc}") from exc
            if is_dir:
                self._mirror(nested_source, nested_destination)
            else:
                _copy_bytes(nested_source, nested_destination)
                self.logger.debug("Copied nested file: %s", nested_destination)


def _copy_bytes(source: Path, destination: Path) -> None:
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise SiteIOError(f"Could not copy {source} to {destination}: {exc}") from exc


__all__ = ["Materializer"]
