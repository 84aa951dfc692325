"""Base exception for Repohash."""

from __future__ import annotations


class RepohashError(Exception):
    """Base class for all Repohash errors."""
