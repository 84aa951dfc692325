"""Shared pytest fixtures for building repository trees."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path

import pytest

ALGORITHM_NAMES: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")


def _reference_digest(data: bytes, algorithm: str) -> str:
    return hashlib.new(algorithm, data).hexdigest()


def _sidecar_snapshot(root: Path) -> dict[str, tuple[bytes, int]]:
    """Map every sidecar below ``root`` to its content and mtime."""
    snapshot: dict[str, tuple[bytes, int]] = {}
    for path in sorted(root.rglob("*")):
        if path.is_file() and path.suffix.removeprefix(".") in ALGORITHM_NAMES:
            snapshot[path.relative_to(root).as_posix()] = (path.read_bytes(), path.stat().st_mtime_ns)
    return snapshot


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes ``data`` to a path relative to ``tmp_path``."""

    def _write(relative: str, data: bytes = b"") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def artifact_repo(tmp_path: Path) -> Path:
    """Small Maven-style repository with nested artifacts and no sidecars."""
    root = tmp_path / "repo"
    files = {
        "com/example/lib/1.0/lib-1.0.jar": b"PK\x03\x04 fake jar contents",
        "com/example/lib/1.0/lib-1.0.pom": b"<project><version>1.0</version></project>\n",
        "com/example/app/2.3/app-2.3.tar.gz": bytes(range(256)) * 64,
        "com/example/app/maven-metadata.xml": b"<metadata/>\n",
        "README": b"no extension here\n",
        "empty.bin": b"",
    }
    for relative, data in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return root


@pytest.fixture
def reference_digest() -> Callable[[bytes, str], str]:
    """Return a digest function computed independently of the code under test."""
    return _reference_digest


@pytest.fixture
def sidecar_snapshot() -> Callable[[Path], dict[str, tuple[bytes, int]]]:
    """Return a helper mapping every sidecar below a root to its content and mtime."""
    return _sidecar_snapshot
