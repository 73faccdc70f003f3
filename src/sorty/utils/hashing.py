"""Streaming content digests.

Files are read through a single fixed-size buffer, so memory use does not
depend on file size, and each handle is closed before the next file is opened.
"""
from pathlib import Path
from typing import Callable, NamedTuple, Protocol

import blake3

DEFAULT_CHUNK_SIZE = 1024 * 1024


class Hasher(Protocol):
    def update(self, data, /): ...

    def digest(self) -> bytes: ...


class HashAlgorithm(NamedTuple):
    """A named digest function used by the content grouper."""
    name: str
    digest_size: int
    calculate: Callable[[Path], bytes]


def compute_digest(path: Path, factory: Callable[[], Hasher], chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Stream path through a hasher created by factory.

    Args:
        path: File to digest
        factory: Zero-argument callable returning an object with update() and digest()
        chunk_size: Size of the read buffer in bytes. Does not affect the result.

    Returns:
        The full, untruncated digest

    Raises:
        OSError: The file cannot be opened or read
        ValueError: chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")

    hasher = factory()
    buffer = bytearray(chunk_size)
    view = memoryview(buffer)
    with open(path, 'rb', buffering=0) as f:
        while True:
            n = f.readinto(buffer)
            if not n:
                break
            hasher.update(view[:n])
    return hasher.digest()


def blake3_algorithm(chunk_size: int = DEFAULT_CHUNK_SIZE) -> HashAlgorithm:
    return HashAlgorithm(
        'blake3', 32, lambda path: compute_digest(path, blake3.blake3, chunk_size))


HASH_ALGORITHMS: dict[str, Callable[[int], HashAlgorithm]] = {
    'blake3': blake3_algorithm,
}
