"""Digest and sidecar-file constants."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 65536
SIDECAR_FILE_MODE: int = 0o644
SIDECAR_ENCODING: str = "ascii"
SIDECAR_TEMP_PREFIX: str = ".repohash-"
