from __future__ import annotations

from pathlib import Path


class FatalIOError(RuntimeError):
    """An I/O failure that aborts the whole run.

    Raised for directory reads, metadata reads and file deletions. Never
    retried and never downgraded to a warning.
    """

    def __init__(self, operation: str, path: Path | str, error: BaseException):
        self.operation = operation
        self.path = Path(path)
        self.error = error
        super().__init__(f"error {operation} {str(self.path)!r}: {error}")
