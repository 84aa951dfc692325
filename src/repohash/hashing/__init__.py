"""Streaming digest computation."""

from .digest import Algorithm, compute_digests, digest_file

__all__ = ["Algorithm", "compute_digests", "digest_file"]
