from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from .errors import FatalIOError
from .models import DirectoryEntry, EntryKind


def _entry_kind(item: os.DirEntry) -> EntryKind:
    if item.is_symlink():
        return EntryKind.SYMLINK
    if item.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if item.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _walk(directory: Path, depth: int) -> Iterator[DirectoryEntry]:
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        raise FatalIOError("walking", directory, exc) from exc

    with scanner:
        while True:
            try:
                item = next(scanner, None)
                if item is None:
                    return
                kind = _entry_kind(item)
            except OSError as exc:
                raise FatalIOError("walking", directory, exc) from exc

            entry = DirectoryEntry(path=directory / item.name, kind=kind, depth=depth)
            yield entry
            if kind is EntryKind.DIRECTORY:
                yield from _walk(entry.path, depth + 1)


def walk_entries(
    root: Path | str,
    sort_key: Callable[[os.stat_result], Any] | None = None,
) -> Iterator[DirectoryEntry]:
    """Yield every entry strictly beneath ``root``.

    Without ``sort_key`` the walk is lazy and pre-order (a directory comes
    before its contents). With ``sort_key`` the whole tree is collected first
    and sorted once, so the order is global across all directory levels, not
    per level. The key receives each entry's ``lstat`` result; the sort is
    stable so equal keys keep walk order.
    """
    root = Path(root)
    if sort_key is None:
        yield from _walk(root, 1)
        return

    entries = list(_walk(root, 1))
    entries.sort(key=lambda entry: sort_key(entry.metadata()))
    yield from entries
