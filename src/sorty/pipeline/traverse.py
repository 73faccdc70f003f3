import logging
import os
import stat
from pathlib import Path
from typing import NamedTuple

from ..errors import EntryUnreadable, PathNotFound, TraversalFailure
from ..utils.walker import walk

logger = logging.getLogger(__name__)


class Collection(NamedTuple):
    """Regular files found under a scan root, in traversal order."""
    files: list[Path]  # Length > 0 at the time of traversal
    empty_files: list[Path]  # Length == 0, never hashed


def collect_files(root: Path, recursive: bool) -> Collection:
    """Traverse root and classify regular files by emptiness.

    The root is resolved following symbolic links; entries below it are not.
    Symbolic links, devices, sockets and entries whose metadata cannot be read
    are skipped. Subdirectories are visited only when recursive is set.

    Args:
        root: A directory or a single file
        recursive: Descend into subdirectories

    Returns:
        Collection of non-empty and empty file paths

    Raises:
        PathNotFound: root does not exist
        TraversalFailure: root is a directory that cannot be listed
    """
    root = Path(root)
    try:
        root_stat = root.stat()
    except OSError as e:
        raise PathNotFound(root) from e

    collection = Collection([], [])

    if stat.S_ISDIR(root_stat.st_mode):
        def report_unlistable(path: Path, exc: OSError):
            logger.warning(EntryUnreadable(path, exc).describe("list directory"))

        try:
            for file_path, context in walk(root, recursive, report_unlistable):
                try:
                    st = context.stat
                except OSError as e:
                    logger.warning(EntryUnreadable(file_path, e).describe("read metadata"))
                    continue
                _classify(file_path, st, collection)
        except OSError as e:
            raise TraversalFailure(root) from e
    elif stat.S_ISREG(root_stat.st_mode):
        _classify(root, root_stat, collection)
    else:
        logger.info(f"Root {root} is neither a file nor a directory; nothing to scan")

    logger.info(f"Collected {len(collection.files)} file(s) and "
                f"{len(collection.empty_files)} empty file(s) under {root}")
    return collection


def _classify(path: Path, st: os.stat_result, collection: Collection):
    if stat.S_ISREG(st.st_mode):
        if st.st_size == 0:
            collection.empty_files.append(path)
        else:
            collection.files.append(path)
    elif not stat.S_ISDIR(st.st_mode):
        logger.debug(f"Skipping non-regular entry: {path}")
