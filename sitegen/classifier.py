"""Classification of source entries into pages, files, and directories."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Callable, Iterable, List

from .errors import ClassificationError, SiteIOError
from .logging import get_logger
from .models import EntryKind, InputEntry
from .paths import list_dir

PAGE_SUFFIX = ".html.jinja"
OUTPUT_DIR_NAME = "dist"

SkipPredicate = Callable[[str], bool]

logger = get_logger("classifier")


def is_page(filename: str) -> bool:
    return filename.endswith(PAGE_SUFFIX)


def must_skip(filename: str) -> bool:
    """Return True for names that never reach the output tree."""
    return (
        filename.startswith(".git")  # the repository, .gitignore and friends
        or filename == OUTPUT_DIR_NAME
        or filename.endswith("~")  # editor backups
        or filename.startswith("_")  # partials pulled in by other templates
    )


def build_skip_predicate(extra_patterns: Iterable[str] = ()) -> SkipPredicate:
    """Extend :func:`must_skip` with user supplied filename patterns."""
    patterns = tuple(pattern for pattern in extra_patterns if pattern)
    if not patterns:
        return must_skip

    def skip(filename: str) -> bool:
        if must_skip(filename):
            return True
        return any(fnmatchcase(filename, pattern) for pattern in patterns)

    return skip


def classify_tree(base_dir: Path, *, skip: SkipPredicate = must_skip) -> List[InputEntry]:
    """Return the flattened, classified entries below ``base_dir``.

    Real directories are descended into and contribute only their contents.
    Symlinks are classified by what they point at but keep the link path, so
    the entry still sits under the source root when mapped to the output.
    Fifos, sockets and device nodes are left out.
    """
    base_dir = Path(base_dir)
    entries: List[InputEntry] = []
    for dir_entry in list_dir(base_dir):
        name = dir_entry.name
        path = base_dir / name
        if skip(name):
            logger.debug("Ignoring entry: %s", path)
            continue
        if is_page(name):
            entries.append(InputEntry(EntryKind.PAGE, path))
            continue

        try:
            is_symlink = dir_entry.is_symlink()
            is_dir = dir_entry.is_dir(follow_symlinks=False)
            is_file = dir_entry.is_file(follow_symlinks=False)
        except OSError as exc:
            raise SiteIOError(f"Could not read type of {path}: {exc}") from exc

        if is_symlink:
            entries.append(_classify_symlink(path))
        elif is_dir:
            entries.extend(classify_tree(path, skip=skip))
        elif is_file:
            entries.append(InputEntry(EntryKind.FILE, path))
        else:
            logger.debug("Ignoring special entry: %s", path)
    return entries


def _classify_symlink(path: Path) -> InputEntry:
    try:
        target = path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ClassificationError(f"Symlink {path} could not be resolved: {exc}") from exc

    if target.is_file():
        return InputEntry(EntryKind.FILE, path)
    if target.is_dir():
        return InputEntry(EntryKind.DIR, path)
    raise ClassificationError(
        f"Symlink {path} points to {target}, which is neither a file nor a directory"
    )


__all__ = [
    "OUTPUT_DIR_NAME",
    "PAGE_SUFFIX",
    "SkipPredicate",
    "build_skip_predicate",
    "classify_tree",
    "is_page",
    "must_skip",
]
