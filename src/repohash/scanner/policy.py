"""Sidecar naming and selection of the algorithms a file still needs."""

from __future__ import annotations

from pathlib import Path

from repohash.hashing import Algorithm
from repohash.types import FileEntry

SIDECAR_SUFFIXES: tuple[str, ...] = tuple(f".{algorithm.extension}" for algorithm in Algorithm)


def sidecar_path(path: Path, algorithm: Algorithm) -> Path:
    """Return ``<name>.<ext>.<algorithm>`` next to ``path``.

    Files without an extension get ``<name>.<algorithm>``.
    """
    return path.with_name(f"{path.name}.{algorithm.extension}")


def is_sidecar_name(name: str) -> bool:
    """Return True when ``name`` already carries a sidecar extension."""
    return name.endswith(SIDECAR_SUFFIXES)


def missing_algorithms(entry: FileEntry) -> tuple[Algorithm, ...]:
    """Return the algorithms whose sidecar for ``entry`` does not exist yet.

    Non-regular entries and sidecar files themselves never need hashing.
    Existence is checked on disk at call time; concurrent runs may both
    observe a sidecar as missing and both write it.

    Raises:
        OSError: a sidecar path could not be checked (for example its name
            exceeds the filesystem limit).
    """
    if not entry.is_file or is_sidecar_name(entry.name):
        return ()
    return tuple(algorithm for algorithm in Algorithm if not _exists(sidecar_path(entry.path, algorithm)))


def _exists(path: Path) -> bool:
    """Like ``Path.exists`` but only a missing file counts as absent."""
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True
