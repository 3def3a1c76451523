from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import FatalIOError


MAX_GOAL_SIZE = 2**64 - 1


@dataclass(frozen=True)
class LimitConfig:
    dry_run: bool
    keep_parents: bool
    goal_size: int
    root_directory: Path

    def __post_init__(self) -> None:
        if not 0 <= int(self.goal_size) <= MAX_GOAL_SIZE:
            raise ValueError(f"goal_size must be between 0 and {MAX_GOAL_SIZE}")
        object.__setattr__(self, "root_directory", Path(self.root_directory))


class EntryKind(enum.Enum):
    FILE = "file"
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"


def is_counted_kind(kind: EntryKind) -> bool:
    return kind in (EntryKind.FILE, EntryKind.SYMLINK)


@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    kind: EntryKind
    depth: int

    def metadata(self) -> os.stat_result:
        # Always lstat: symlinks are counted and removed as links.
        try:
            return os.lstat(self.path)
        except OSError as exc:
            raise FatalIOError("getting metadata of", self.path, exc) from exc


@dataclass
class EvictionResult:
    initial_size: int
    final_size: int
    dry_run: bool = False
    goal_reached: bool = True
    files_removed: int = 0
    bytes_freed: int = 0
    directories_removed: int = 0
    removed_paths: list[Path] = field(default_factory=list)

    @property
    def cleaned(self) -> bool:
        return self.files_removed > 0
