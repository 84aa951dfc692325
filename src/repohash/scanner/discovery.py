"""Lazy directory traversal yielding typed filesystem entries."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from repohash.constants.config import DEFAULT_FOLLOW_LINKS
from repohash.types import EntryKind, FileEntry

logger = logging.getLogger(__name__)


def walk_entries(root: Path, *, follow_links: bool = DEFAULT_FOLLOW_LINKS) -> Iterator[FileEntry]:
    """Yield the root, every directory and every file below ``root``.

    Symbolic links are followed when ``follow_links`` is set and entries are
    typed by their target. Unreadable directories, broken links and entries
    that vanish mid-walk are skipped. A directory reachable through several
    links is descended only once, which also breaks link cycles.
    """
    visited: set[tuple[int, int]] = set()

    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_links, onerror=_log_walk_error):
        current = Path(dirpath)
        identity = _identity(current)
        if identity is None or identity in visited:
            dirnames[:] = []
            continue
        visited.add(identity)
        yield FileEntry(path=current, kind=EntryKind.DIRECTORY)

        if follow_links:
            dirnames[:] = [name for name in dirnames if _identity(current / name) not in visited]

        for filename in filenames:
            entry = _file_entry(current / filename, follow_links=follow_links)
            if entry is not None:
                yield entry


def _file_entry(path: Path, *, follow_links: bool) -> FileEntry | None:
    try:
        mode = os.stat(path, follow_symlinks=follow_links).st_mode
    except OSError as exc:
        logger.debug("Skipping unreadable entry %s: %s", path, exc)
        return None
    if stat.S_ISREG(mode):
        kind = EntryKind.FILE
    elif stat.S_ISDIR(mode):
        kind = EntryKind.DIRECTORY
    else:
        kind = EntryKind.OTHER
    return FileEntry(path=path, kind=kind)


def _identity(path: Path) -> tuple[int, int] | None:
    try:
        info = os.stat(path)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return None
    return info.st_dev, info.st_ino


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc)
