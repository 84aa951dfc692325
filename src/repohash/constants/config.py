"""Configuration defaults."""

from __future__ import annotations

import os

from repohash.constants.hashing import FILE_HASH_CHUNK_SIZE

DEFAULT_FOLLOW_LINKS: bool = True
DEFAULT_CHUNK_SIZE: int = FILE_HASH_CHUNK_SIZE
MIN_CHUNK_SIZE: int = 1


def default_thread_count() -> int:
    """Return the host parallelism, falling back to a single worker."""
    return os.cpu_count() or 1
