import os
import stat
from pathlib import Path
from typing import Callable, Iterator


class FileContext:
    """Context object for an entry encountered during traversal.

    The stat result is fetched lazily with lstat(), so symbolic links are
    described as links rather than as their targets. A failed stat() is not
    cached; the OSError is raised again on the next access.
    """
    def __init__(self, path: Path | None = None, st: os.stat_result | None = None):
        self._stat: os.stat_result | None = st
        self._path: Path | None = path

    @property
    def stat(self) -> os.stat_result:
        if self._stat is None:
            if self._path is None:
                raise LookupError("stat not available and path not provided")
            self._stat = self._path.stat(follow_symlinks=False)
        return self._stat

    def is_dir(self):
        return stat.S_ISDIR(self.stat.st_mode)


ErrorHandler = Callable[[Path, OSError], None]


def walk(path: Path, recursive: bool = True,
         on_error: ErrorHandler | None = None) -> Iterator[tuple[Path, FileContext]]:
    """Traverse a directory depth-first in listing order.

    Every entry is yielded before its children. Directories are descended into
    only when recursive is set, and symbolic links are never followed.

    Failing to list path itself raises OSError. Failing to list a nested
    directory is passed to on_error and the subtree is skipped; without
    on_error it is raised as well.

    Args:
        path: Directory to list
        recursive: Descend into subdirectories
        on_error: Called with (directory, exception) for nested listing failures

    Yields:
        Tuples of (path, file_context) for each entry encountered
    """
    child: Path
    for child in path.iterdir():
        context = FileContext(child)
        yield child, context

        if not recursive:
            continue

        try:
            descend = context.is_dir()
        except OSError:
            # The consumer sees the same failure when it classifies the entry
            continue

        if descend:
            try:
                yield from walk(child, recursive, on_error)
            except OSError as e:
                if on_error is None:
                    raise
                on_error(child, e)
