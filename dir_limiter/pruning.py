from __future__ import annotations

import logging
import os
from pathlib import Path


LOGGER = logging.getLogger("dir_limiter")


class DirectoryRemover:
    """Removes a single empty directory, reporting failure as ``False``.

    Removal of a non-empty directory fails, which is the normal way an
    ancestor walk ends, so errors are never raised from here.
    """

    def remove(self, path: Path) -> bool:
        try:
            os.rmdir(path)
        except OSError:
            return False
        return True


def _is_within(path: Path, within: Path) -> bool:
    return path == within or within in path.parents


def remove_empty_ancestors(
    path: Path | str,
    within: Path | str,
    remover: DirectoryRemover | None = None,
) -> int:
    path = Path(path)
    within = Path(within)
    remover = remover or DirectoryRemover()

    removed = 0
    for ancestor in path.parents:
        if not _is_within(ancestor, within):
            break
        if not remover.remove(ancestor):
            break
        removed += 1
        LOGGER.info("[LIMITER]: deleted empty ancestor %s", ancestor)
    return removed
