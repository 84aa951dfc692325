"""Shared types for Repohash."""

from .entry import EntryKind, FileEntry
from .common import Hasher, Task

__all__ = ["EntryKind", "FileEntry", "Hasher", "Task"]
