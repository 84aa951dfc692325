"""Configuration-related exceptions."""

from __future__ import annotations

from repohash.exceptions.base import RepohashError


class ConfigError(RepohashError, ValueError):
    """Raised when run configuration is invalid."""
