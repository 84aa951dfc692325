"""Shared constants for Repohash."""
