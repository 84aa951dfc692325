"""Traversal, sidecar policy, worker pool and run orchestration."""

from __future__ import annotations

from .discovery import walk_entries
from .orchestrator import generate_sidecars, process_entry, write_sidecar
from .policy import is_sidecar_name, missing_algorithms, sidecar_path
from .pool import WorkerPool

__all__ = [
    "WorkerPool",
    "generate_sidecars",
    "is_sidecar_name",
    "missing_algorithms",
    "process_entry",
    "sidecar_path",
    "walk_entries",
    "write_sidecar",
]
