"""Config loading and normalization for Repohash runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from repohash.config.model import RepohashConfig
from repohash.constants.config import DEFAULT_CHUNK_SIZE, DEFAULT_FOLLOW_LINKS, MIN_CHUNK_SIZE, default_thread_count
from repohash.constants.validation import ALLOWED_CONFIG_KEYS
from repohash.exceptions import ConfigError


def load_config(config_path: Path | None = None) -> RepohashConfig:
    """Load and validate run config from an explicit YAML file.

    Without a path the defaults apply. Repohash never looks for a config file
    inside the repository it hashes.
    """
    if config_path is None:
        return RepohashConfig()

    path = config_path.resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    return RepohashConfig(
        threads=_positive_int(raw.get("threads", default_thread_count()), "threads", minimum=1),
        verbose=_boolean(raw.get("verbose", False), "verbose"),
        dry_run=_boolean(raw.get("dry_run", False), "dry_run"),
        follow_links=_boolean(raw.get("follow_links", DEFAULT_FOLLOW_LINKS), "follow_links"),
        chunk_size=_positive_int(raw.get("chunk_size", DEFAULT_CHUNK_SIZE), "chunk_size", minimum=MIN_CHUNK_SIZE),
    )


def _boolean(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _positive_int(value: Any, key_name: str, *, minimum: int) -> int:
    """Reject bools (an ``int`` subclass) and values below ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"{key_name} must be an integer >= {minimum}")
    return value
