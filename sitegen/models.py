"""Core data models shared across sitegen components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class EntryKind(Enum):
    """How a source entry is materialized."""

    PAGE = "page"
    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class InputEntry:
    """A classified source entry, addressed by the path it was found at."""

    kind: EntryKind
    path: Path


@dataclass
class BuildReport:
    """Outputs written by a single generation run."""

    source: Path
    output: Path
    pages: List[Path] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)
    dirs: List[Path] = field(default_factory=list)

    def record(self, kind: EntryKind, destination: Path) -> None:
        if kind is EntryKind.PAGE:
            self.pages.append(destination)
        elif kind is EntryKind.FILE:
            self.files.append(destination)
        else:
            self.dirs.append(destination)
