import logging
from pathlib import Path
from typing import Iterable

from ..errors import EntryUnreadable

logger = logging.getLogger(__name__)


def group_by_size(paths: Iterable[Path]) -> dict[int, list[Path]]:
    """Partition paths by their current byte length.

    Files of different sizes cannot have equal content, so only buckets with
    more than one member need to be hashed. Buckets keep traversal order.
    Paths whose metadata cannot be read are dropped.
    """
    buckets: dict[int, list[Path]] = {}
    for path in paths:
        try:
            size = path.stat().st_size
        except OSError as e:
            logger.warning(EntryUnreadable(path, e).describe("read metadata"))
            continue
        buckets.setdefault(size, []).append(path)

    logger.info(f"Partitioned files into {len(buckets)} size bucket(s), "
                f"{sum(1 for bucket in buckets.values() if len(bucket) > 1)} with candidates")
    return buckets
