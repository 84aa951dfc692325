"""Per-file hashing and sidecar-write failures."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from repohash.exceptions.base import RepohashError


class HashingError(RepohashError):
    """Raised when a source file cannot be opened or read for hashing."""

    def __init__(self, path: Path, algorithms: Sequence[str], cause: OSError) -> None:
        self.path = path
        self.algorithms = tuple(str(algorithm) for algorithm in algorithms)
        super().__init__(f"cannot compute {', '.join(self.algorithms)} for {path}: {cause}")


class SidecarWriteError(RepohashError):
    """Raised when a sidecar file cannot be created or written."""

    def __init__(self, path: Path, algorithm: str, cause: OSError) -> None:
        self.path = path
        self.algorithm = str(algorithm)
        super().__init__(f"cannot write {self.algorithm} sidecar {path}: {cause}")
