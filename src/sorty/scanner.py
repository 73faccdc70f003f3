import datetime
import logging
import os
import time
from pathlib import Path
from typing import NamedTuple

from .settings import ScanSettings, SETTING_CHUNK_SIZE, SETTING_LOGGING_LEVEL, SETTING_LOGGING_PATH
from .pipeline import DuplicateGroup, collect_files, group_by_size, group_by_content
from .utils.hashing import DEFAULT_CHUNK_SIZE, HASH_ALGORITHMS, HashAlgorithm

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ScanResult(NamedTuple):
    """Outcome of one scan, consumed by the report renderer."""
    duplicate_groups: list[DuplicateGroup]
    empty_files: list[Path]
    file_count: int  # Non-empty files found by traversal
    elapsed: datetime.timedelta  # Traversal through grouping


class Scanner:
    """Workflow layer running the duplicate-detection pipeline.

    A scan runs three stages in order: traversal collects regular files and
    sets empty ones aside, size bucketing partitions the rest by length, and
    content grouping digests files only within buckets of two or more.

    Everything a scan builds is local to the call; a Scanner keeps no results
    between scans.
    """

    def __init__(self, settings: ScanSettings | None = None):
        """Initialize scanner.

        Args:
            settings: Loaded settings, or None for defaults

        Raises:
            ValueError: scan.chunk_size is not a positive integer
        """
        if settings is None:
            settings = ScanSettings()
        self._settings = settings

        chunk_size = settings.get(SETTING_CHUNK_SIZE, DEFAULT_CHUNK_SIZE)
        if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
            raise ValueError(f"{SETTING_CHUNK_SIZE} must be a positive integer, got {chunk_size!r}")

        self._hash_algorithms: dict[str, HashAlgorithm] = {
            name: make(chunk_size) for name, make in HASH_ALGORITHMS.items()
        }
        self._default_hash_algorithm = 'blake3'

    def configure_logging_from_settings(self) -> bool:
        """Configure logging from settings if a log path is specified.

        Preserves the current logging level if already configured (e.g., from CLI arguments)
        unless logging.level is set.

        Returns:
            True if logging was configured, False otherwise

        Raises:
            ValueError: logging.level is not a known level name
            OSError: The log file cannot be opened
        """
        log_path_setting = self._settings.get(SETTING_LOGGING_PATH)
        if not log_path_setting:
            return False

        level_setting = self._settings.get(SETTING_LOGGING_LEVEL)
        if level_setting:
            level_name = str(level_setting).upper()
            if level_name not in LOG_LEVELS:
                raise ValueError(f"{SETTING_LOGGING_LEVEL} must be one of {', '.join(LOG_LEVELS)}, got {level_setting!r}")
            current_level = getattr(logging, level_name)
        else:
            current_level = logging.root.level if logging.root.level != logging.NOTSET else logging.INFO

        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        logging.basicConfig(
            filename=str(log_path_setting),
            level=current_level,
            format=LOG_FORMAT
        )
        return True

    def scan(self, root: str | os.PathLike, recursive: bool = False) -> ScanResult:
        """Find duplicate and empty files under root.

        Args:
            root: Directory or single file to scan
            recursive: Descend into subdirectories

        Returns:
            ScanResult with duplicate groups, empty files and elapsed time

        Raises:
            PathNotFound: root does not exist
            TraversalFailure: root cannot be listed
        """
        hash_algorithm = self._hash_algorithms[self._default_hash_algorithm]
        root = Path(root)

        start = time.monotonic()
        logger.info(f"Scanning {root} ({'recursive' if recursive else 'non-recursive'})")

        collection = collect_files(root, recursive)
        size_buckets = group_by_size(collection.files)
        groups = group_by_content(size_buckets, hash_algorithm)

        elapsed = datetime.timedelta(seconds=time.monotonic() - start)
        logger.info(f"Scan of {root} finished in {elapsed.total_seconds():.3f}s")

        return ScanResult(groups, collection.empty_files, len(collection.files), elapsed)


def scan(root: str | os.PathLike, recursive: bool = False) -> ScanResult:
    """Scan root with default settings."""
    return Scanner().scan(root, recursive)
