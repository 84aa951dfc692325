"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "REPOHASH"
CLI_DESCRIPTION: str = (
    f"{BRAND_NAME} checksum sidecar generator\n\n"
    "Walks a repository folder and writes missing .md5, .sha1, .sha256 and .sha512\n"
    "sidecar files next to every regular file."
)
