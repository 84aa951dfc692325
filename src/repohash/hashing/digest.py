"""Streaming multi-algorithm digests with constant memory use.

Every algorithm in :class:`Algorithm` names both a ``hashlib`` constructor
and the extension of the sidecar file that stores its output. Digests are
always rendered as lowercase hexadecimal without separators or prefixes.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from typing import BinaryIO

from repohash.constants.hashing import FILE_HASH_CHUNK_SIZE
from repohash.exceptions import HashingError
from repohash.types import Hasher


class Algorithm(StrEnum):
    """Closed set of supported sidecar algorithms, in canonical order."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def extension(self) -> str:
        """Sidecar file extension, without the leading dot."""
        return self.value

    def new_hasher(self) -> Hasher:
        """Return a fresh streaming hash object for this algorithm."""
        match self:
            case Algorithm.MD5:
                return hashlib.md5(usedforsecurity=False)
            case Algorithm.SHA1:
                return hashlib.sha1(usedforsecurity=False)
            case Algorithm.SHA256:
                return hashlib.sha256()
            case Algorithm.SHA512:
                return hashlib.sha512()


def compute_digests(
    stream: BinaryIO,
    algorithms: Iterable[Algorithm],
    *,
    chunk_size: int = FILE_HASH_CHUNK_SIZE,
) -> dict[Algorithm, str]:
    """Fold ``stream`` into every requested algorithm in a single pass.

    Reads at most ``chunk_size`` bytes at a time. Read errors propagate to
    the caller untouched.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    hashers = {algorithm: algorithm.new_hasher() for algorithm in algorithms}
    if not hashers:
        return {}

    for chunk in iter(lambda: stream.read(chunk_size), b""):
        for hasher in hashers.values():
            hasher.update(chunk)

    return {algorithm: hasher.hexdigest() for algorithm, hasher in hashers.items()}


def digest_file(
    path: Path,
    algorithms: Iterable[Algorithm],
    *,
    chunk_size: int = FILE_HASH_CHUNK_SIZE,
) -> dict[Algorithm, str]:
    """Hash the file at ``path`` once for every requested algorithm.

    Raises:
        HashingError: the file could not be opened or read.
    """
    requested = tuple(algorithms)
    try:
        with path.open("rb") as handle:
            return compute_digests(handle, requested, chunk_size=chunk_size)
    except OSError as exc:
        raise HashingError(path, requested, exc) from exc
