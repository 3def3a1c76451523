from __future__ import annotations

import logging
import os

from .accounting import measure_tree
from .errors import FatalIOError
from .models import EvictionResult, LimitConfig, is_counted_kind
from .pruning import DirectoryRemover, remove_empty_ancestors
from .units import format_size
from .walker import walk_entries


LOGGER = logging.getLogger("dir_limiter")


def _modification_time(stat: os.stat_result) -> int:
    return int(stat.st_mtime_ns)


def enforce_size_limit(config: LimitConfig, remover: DirectoryRemover | None = None) -> EvictionResult:
    """Delete the oldest files beneath the configured root until it fits the goal.

    The tree is measured in a first walk. Only when it is over the goal is a
    second walk made, ordered oldest first across the whole tree, removing
    files one at a time until the running total is at or below the goal or
    the walk runs out of files. Any I/O failure other than an ancestor
    directory refusing removal raises :class:`FatalIOError`.
    """
    root = config.root_directory
    goal = int(config.goal_size)

    size = measure_tree(root)
    result = EvictionResult(initial_size=size, final_size=size, dry_run=config.dry_run)
    if size <= goal:
        LOGGER.info("[LIMITER]: no need to delete anything, exiting")
        return result

    action = "would delete" if config.dry_run else "deleting"
    result.goal_reached = False

    for entry in walk_entries(root, sort_key=_modification_time):
        if not is_counted_kind(entry.kind):
            continue

        path = entry.path
        file_size = int(entry.metadata().st_size)
        size = max(size - file_size, 0)
        LOGGER.info("[LIMITER]: %s %s, size is now %s", action, path, format_size(size))

        if not config.dry_run:
            try:
                os.remove(path)
            except OSError as exc:
                raise FatalIOError("deleting", path, exc) from exc

            if not config.keep_parents:
                result.directories_removed += remove_empty_ancestors(path, root, remover=remover)

        result.files_removed += 1
        result.bytes_freed += file_size
        result.removed_paths.append(path)
        result.final_size = size

        if size <= goal:
            result.goal_reached = True
            LOGGER.info("[LIMITER]: size is now under limit, exiting")
            break

    if not result.goal_reached:
        LOGGER.warning(
            "[LIMITER]: ran out of files to delete, size is still %s (goal %s)",
            format_size(size),
            format_size(goal),
        )
    return result
