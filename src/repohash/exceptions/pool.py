"""Worker pool usage errors."""

from __future__ import annotations

from repohash.exceptions.base import RepohashError


class PoolClosedError(RepohashError, RuntimeError):
    """Raised when a task is enqueued after the pool stopped accepting work."""
