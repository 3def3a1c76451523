from __future__ import annotations

import logging
from pathlib import Path

from .models import is_counted_kind
from .units import format_size
from .walker import walk_entries


LOGGER = logging.getLogger("dir_limiter")


def measure_tree(root: Path | str) -> int:
    """Return the summed size of every file and symlink beneath ``root``."""
    total = 0
    for entry in walk_entries(root):
        if not is_counted_kind(entry.kind):
            continue
        total += int(entry.metadata().st_size)

    LOGGER.info("[LIMITER]: initial size is %s", format_size(total))
    return total
