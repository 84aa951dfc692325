"""Shared file I/O helpers."""

from .files import write_text_atomic

__all__ = ["write_text_atomic"]
