"""Tests for copy-on-difference staging."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from taslaunch.core.staging import copy_if_different, file_digest, stage_file


class TestFileDigest:
    def test_is_lowercase_sha1(self) -> None:
        assert file_digest(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_matches_hashlib(self) -> None:
        data = bytes(range(256)) * 4
        assert file_digest(data) == hashlib.sha1(data).hexdigest()


class TestCopyIfDifferent:
    def test_creates_missing_file(self, tmp_path: Path) -> None:
        dest = tmp_path / "out.bin"
        assert copy_if_different(b"hello", dest) is True
        assert dest.read_bytes() == b"hello"

    def test_skips_identical_content(self, tmp_path: Path) -> None:
        dest = tmp_path / "out.bin"
        dest.write_bytes(b"hello")
        os.utime(dest, ns=(1_000_000_000, 1_000_000_000))

        assert copy_if_different(b"hello", dest) is False
        assert dest.stat().st_mtime_ns == 1_000_000_000

    def test_overwrites_different_content(self, tmp_path: Path) -> None:
        dest = tmp_path / "out.bin"
        dest.write_bytes(b"old contents that are longer")

        assert copy_if_different(b"new", dest) is True
        assert dest.read_bytes() == b"new"

    def test_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        copy_if_different(b"one", tmp_path / "a")
        copy_if_different(b"two", tmp_path / "a")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a"]

    def test_keeps_existing_mode(self, tmp_path: Path) -> None:
        dest = tmp_path / "script.sh"
        dest.write_bytes(b"old")
        dest.chmod(0o755)

        copy_if_different(b"new", dest)
        assert dest.stat().st_mode & 0o777 == 0o755

    def test_does_not_create_parent_directories(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            copy_if_different(b"x", tmp_path / "missing" / "out.bin")
        assert not (tmp_path / "missing").exists()


class TestStageFile:
    def test_copies_source_bytes(self, tmp_path: Path) -> None:
        src = tmp_path / "src.nes"
        src.write_bytes(b"\x4e\x45\x53\x1a")
        dest = tmp_path / "dest.nes"

        assert stage_file(src, dest) is True
        assert dest.read_bytes() == src.read_bytes()
        assert stage_file(src, dest) is False

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            stage_file(tmp_path / "nope", tmp_path / "dest")
