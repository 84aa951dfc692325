"""Command-line interface for Repohash."""
