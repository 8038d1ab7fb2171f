from __future__ import annotations

from pathlib import Path


class InvalidDirectoryError(ValueError):
    """Raised when the directory to scan is missing or is not a directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid directory path: {self.path}")


class FileReadError(OSError):
    """A single record file could not be read; the run skips it."""

    def __init__(self, path: Path | str, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error reading file: {self.path} ({cause})")
