"""Shared exception hierarchy for Repohash."""

from __future__ import annotations

from .base import RepohashError
from .config import ConfigError
from .hashing import HashingError, SidecarWriteError
from .pool import PoolClosedError

__all__ = [
    "ConfigError",
    "HashingError",
    "PoolClosedError",
    "RepohashError",
    "SidecarWriteError",
]
