"""Configuration loading, validation, and normalization for Repohash runs."""

from __future__ import annotations

from repohash.config.loader import load_config
from repohash.config.model import RepohashConfig
from repohash.config.validator import validate_config_file

__all__ = [
    "RepohashConfig",
    "load_config",
    "validate_config_file",
]
