from .errors import FatalIOError
from .eviction import enforce_size_limit
from .models import DirectoryEntry, EntryKind, EvictionResult, LimitConfig, is_counted_kind
from .pruning import DirectoryRemover, remove_empty_ancestors
from .walker import walk_entries


__version__ = "0.1.0"


__all__ = [
    "DirectoryEntry",
    "DirectoryRemover",
    "EntryKind",
    "EvictionResult",
    "FatalIOError",
    "LimitConfig",
    "enforce_size_limit",
    "is_counted_kind",
    "remove_empty_ancestors",
    "walk_entries",
]
