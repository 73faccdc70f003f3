"""Exception types raised by the scanning pipeline.

Only whole-operation failures are raised to callers. Problems with individual
entries are described by EntryUnreadable and logged, never raised.
"""
from pathlib import Path
from typing import NamedTuple


class SortyError(Exception):
    """Base class for caller-visible scan failures."""


class PathNotFound(SortyError):
    """The scan root does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Path {str(path)!r} does not exist")
        self.path = path


class TraversalFailure(SortyError):
    """The scan root could not be listed."""

    def __init__(self, path: Path):
        super().__init__(f"Cannot list directory {str(path)!r}")
        self.path = path


class EntryUnreadable(NamedTuple):
    """An entry skipped during traversal, bucketing or hashing."""
    path: Path
    reason: OSError

    def describe(self, action: str) -> str:
        return f"Skipping {self.path}: failed to {action}: {self.reason}"
