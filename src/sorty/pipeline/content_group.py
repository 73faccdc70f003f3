import logging
from pathlib import Path
from typing import Mapping, NamedTuple

from ..errors import EntryUnreadable
from ..utils.hashing import HashAlgorithm

logger = logging.getLogger(__name__)


class DuplicateGroup(NamedTuple):
    """Files of equal size whose content hashed to the same digest.

    Paths are in traversal order. The first one is labelled the original and
    the rest duplicates; the labels carry no meaning beyond that order.
    """
    size: int
    digest: bytes
    paths: list[Path]

    @property
    def original(self) -> Path:
        return self.paths[0]

    @property
    def duplicates(self) -> list[Path]:
        return self.paths[1:]


def group_by_content(size_buckets: Mapping[int, list[Path]], hash_algorithm: HashAlgorithm) -> list[DuplicateGroup]:
    """Digest every file in each multi-member bucket and group equal digests.

    Hashing never spans buckets, so files of unique size are never read.
    A file that cannot be opened or read is left out of every group.

    Args:
        size_buckets: Mapping from byte length to paths, as built by group_by_size()
        hash_algorithm: Digest function applied to each candidate file

    Returns:
        Groups with at least two members, ordered by bucket then by first member
    """
    groups: list[DuplicateGroup] = []

    for size, bucket in size_buckets.items():
        if len(bucket) <= 1:
            continue

        by_digest: dict[bytes, list[Path]] = {}
        for path in bucket:
            logger.debug(f"Computing {hash_algorithm.name} digest for: {path}")
            try:
                digest = hash_algorithm.calculate(path)
            except OSError as e:
                logger.warning(EntryUnreadable(path, e).describe("hash"))
                continue
            by_digest.setdefault(digest, []).append(path)

        for digest, paths in by_digest.items():
            if len(paths) > 1:
                groups.append(DuplicateGroup(size, digest, paths))

    logger.info(f"Found {len(groups)} duplicate group(s)")
    return groups
