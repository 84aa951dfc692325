"""End-to-end sidecar generation for a repository folder.

``generate_sidecars`` is the primary entry point: it feeds every traversal
entry to a :class:`WorkerPool` as a task and drains the pool before
returning. Per-file failures are logged and never abort the run.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from repohash.config import RepohashConfig
from repohash.constants.hashing import SIDECAR_ENCODING, SIDECAR_FILE_MODE, SIDECAR_TEMP_PREFIX
from repohash.exceptions import ConfigError, HashingError, SidecarWriteError
from repohash.hashing import Algorithm, digest_file
from repohash.io import write_text_atomic
from repohash.scanner.discovery import walk_entries
from repohash.scanner.policy import missing_algorithms, sidecar_path
from repohash.scanner.pool import WorkerPool
from repohash.types import FileEntry

logger = logging.getLogger(__name__)


def generate_sidecars(*, root: Path, config: RepohashConfig) -> None:
    """Write every missing checksum sidecar below ``root``.

    Traversal runs on the calling thread while workers hash concurrently.
    The pool is always drained before this returns; an interrupt discards
    tasks that have not started yet.
    """
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Repository folder does not exist or is not a directory: {root}")

    logger.debug(
        "Generating sidecars under %s with %d thread(s)%s",
        root,
        config.threads,
        " (dry run)" if config.dry_run else "",
    )
    pool = WorkerPool(config.threads)
    submitted = 0
    try:
        for entry in walk_entries(root, follow_links=config.follow_links):
            pool.enqueue(partial(process_entry, entry, config))
            submitted += 1
    except BaseException:
        pool.cancel()
        raise
    finally:
        _drain(pool)
    logger.debug("Processed %d entries under %s", submitted, root)


def _drain(pool: WorkerPool) -> None:
    """Wait for the pool; an interrupt mid-wait cancels pending tasks and waits again."""
    try:
        pool.stop_wait()
    except KeyboardInterrupt:
        pool.cancel()
        pool.stop_wait()
        raise


def process_entry(entry: FileEntry, config: RepohashConfig) -> None:
    """Compute and write the sidecars ``entry`` is missing.

    Checking, hashing or writing failures are logged and end this entry's
    work; the remaining sidecars for the file are left for a later run.
    """
    try:
        algorithms = missing_algorithms(entry)
    except OSError as exc:
        logger.error("Failed to check sidecars for %s: %s", entry.path, exc)
        return
    if not algorithms:
        return

    if config.effective_verbose:
        for algorithm in algorithms:
            logger.info("Computing %s for %s", algorithm, entry.path)
    if config.dry_run:
        return

    try:
        digests = digest_file(entry.path, algorithms, chunk_size=config.chunk_size)
        for algorithm in algorithms:
            write_sidecar(entry.path, algorithm, digests[algorithm])
    except HashingError as exc:
        logger.error("Failed to hash %s: %s", entry.path, exc)
    except SidecarWriteError as exc:
        logger.error("Failed to write sidecar %s: %s", exc.path, exc)


def write_sidecar(source: Path, algorithm: Algorithm, digest: str) -> Path:
    """Atomically write ``digest`` to the ``algorithm`` sidecar of ``source``.

    The temporary file ends in the algorithm extension so a concurrent
    traversal never selects it as a hashing target, and its name stays short
    so it is creatable whenever the sidecar name itself is.

    Raises:
        SidecarWriteError: the sidecar could not be created or written.
    """
    target = sidecar_path(source, algorithm)
    try:
        write_text_atomic(
            path=target,
            text=digest,
            temp_prefix=SIDECAR_TEMP_PREFIX,
            temp_suffix=f".{algorithm.extension}",
            encoding=SIDECAR_ENCODING,
            mode=SIDECAR_FILE_MODE,
        )
    except OSError as exc:
        raise SidecarWriteError(target, algorithm, exc) from exc
    return target
