"""Tests for lazy repository traversal."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from repohash.scanner.discovery import walk_entries
from repohash.types import EntryKind, FileEntry


def _by_path(entries: Iterator[FileEntry], root: Path) -> dict[str, EntryKind]:
    return {entry.path.relative_to(root).as_posix(): entry.kind for entry in entries}


def test_yields_root_directories_and_files(artifact_repo: Path) -> None:
    found = _by_path(walk_entries(artifact_repo), artifact_repo)

    assert found["."] is EntryKind.DIRECTORY
    assert found["com/example/lib/1.0"] is EntryKind.DIRECTORY
    assert found["com/example/lib/1.0/lib-1.0.jar"] is EntryKind.FILE
    assert found["README"] is EntryKind.FILE
    assert found["empty.bin"] is EntryKind.FILE
    assert len([kind for kind in found.values() if kind is EntryKind.FILE]) == 6


def test_walk_is_lazy(artifact_repo: Path) -> None:
    entries = walk_entries(artifact_repo)

    first = next(entries)

    assert first == FileEntry(path=artifact_repo, kind=EntryKind.DIRECTORY)


def test_follows_directory_links(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    write_file("elsewhere/shared/data.bin", b"shared")
    root = tmp_path / "repo"
    root.mkdir()
    os.symlink(tmp_path / "elsewhere" / "shared", root / "linked")

    found = _by_path(walk_entries(root), root)

    assert found["linked"] is EntryKind.DIRECTORY
    assert found["linked/data.bin"] is EntryKind.FILE


def test_file_links_are_typed_by_target(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    target = write_file("repo/real.jar", b"jar")
    os.symlink(target, tmp_path / "repo" / "alias.jar")

    found = _by_path(walk_entries(tmp_path / "repo"), tmp_path / "repo")

    assert found["alias.jar"] is EntryKind.FILE


def test_no_follow_links_leaves_links_untyped(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    target = write_file("repo/real.jar", b"jar")
    write_file("elsewhere/inner.bin", b"x")
    os.symlink(target, tmp_path / "repo" / "alias.jar")
    os.symlink(tmp_path / "elsewhere", tmp_path / "repo" / "linked")

    found = _by_path(walk_entries(tmp_path / "repo", follow_links=False), tmp_path / "repo")

    assert found["alias.jar"] is EntryKind.OTHER
    assert "linked/inner.bin" not in found


def test_broken_links_are_skipped(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    write_file("repo/ok.jar", b"ok")
    os.symlink(tmp_path / "missing.jar", tmp_path / "repo" / "dangling.jar")

    found = _by_path(walk_entries(tmp_path / "repo"), tmp_path / "repo")

    assert "ok.jar" in found
    assert "dangling.jar" not in found


def test_link_cycles_terminate(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    write_file("repo/a/file.jar", b"x")
    os.symlink(tmp_path / "repo", tmp_path / "repo" / "a" / "loop")

    entries = list(walk_entries(tmp_path / "repo"))

    files = [entry for entry in entries if entry.is_file]
    assert [entry.name for entry in files] == ["file.jar"]


def test_special_files_are_other(tmp_path: Path) -> None:
    if not hasattr(os, "mkfifo"):
        pytest.skip("FIFOs are not supported on this platform")
    root = tmp_path / "repo"
    root.mkdir()
    os.mkfifo(root / "pipe")

    found = _by_path(walk_entries(root), root)

    assert found["pipe"] is EntryKind.OTHER


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="permissions are not enforced for root")
def test_unreadable_directories_are_skipped(tmp_path: Path, write_file: Callable[[str, bytes], Path]) -> None:
    write_file("repo/open/visible.jar", b"v")
    write_file("repo/locked/hidden.jar", b"h")
    locked = tmp_path / "repo" / "locked"
    locked.chmod(0)
    try:
        found = _by_path(walk_entries(tmp_path / "repo"), tmp_path / "repo")
    finally:
        locked.chmod(0o755)

    assert "open/visible.jar" in found
    assert "locked/hidden.jar" not in found
